from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from gedcom_tree.graph.graph_builder import FamilyGraph
from gedcom_tree.registry.entities import GedcomDocument


@dataclass
class LayoutContext:
    """
    Per-parse pipeline state.
    Each stage reads what the previous one left here; nothing is shared
    between parses.
    """

    config: Any
    logger: Any

    content: Union[str, bytes, None] = None
    input_path: Optional[str] = None
    output_path: Optional[str] = None

    document: Optional[GedcomDocument] = None
    graph: Optional[FamilyGraph] = None
    generations: Dict[str, int] = field(default_factory=dict)

    stats: Dict[str, Any] = field(default_factory=dict)


@dataclass
class LayoutResult:
    """What rendering collaborators consume."""

    document: GedcomDocument
    graph: FamilyGraph
    generations: Dict[str, int] = field(default_factory=dict)
