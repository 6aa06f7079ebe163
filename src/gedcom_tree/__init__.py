"""
gedcom-tree: GEDCOM text -> individuals/families -> generation-ordered layout graph.

    from gedcom_tree import build_family_graph

    result = build_family_graph(text)
    for node in result.graph.nodes:
        print(node.name, node.generation, node.x, node.y)
"""

from __future__ import annotations

from typing import Union

from gedcom_tree.config import get_config
from gedcom_tree.core import LayoutContext, LayoutResult, Pipeline
from gedcom_tree.loader import parse_gedcom
from gedcom_tree.logging import get_logger

__version__ = "0.1.0"


def build_family_graph(content: Union[str, bytes], config=None) -> LayoutResult:
    """Parse ``content`` and lay out its family graph in one call."""
    cfg = config if config is not None else get_config()
    ctx = LayoutContext(
        config=cfg,
        logger=get_logger("pipeline"),
        content=content,
    )
    return Pipeline(ctx).run()


__all__ = [
    "LayoutResult",
    "build_family_graph",
    "parse_gedcom",
    "__version__",
]
