"""
Graph and layout stage: relationship graph, generations, coordinates.
"""

from __future__ import annotations

from .graph_builder import (
    MARRIAGE,
    PARENT_CHILD,
    DroppedReference,
    FamilyGraph,
    Link,
    Node,
    build_graph,
    display_name,
    lifespan,
)
from .generations import assign_generations, estimate_generation
from .layout import LayoutEngine, layout_graph
from .queries import first_match, graph_summary, search_nodes, sex_label, truncate_label

__all__ = [
    "MARRIAGE",
    "PARENT_CHILD",
    "DroppedReference",
    "FamilyGraph",
    "Link",
    "Node",
    "build_graph",
    "display_name",
    "lifespan",
    "assign_generations",
    "estimate_generation",
    "LayoutEngine",
    "layout_graph",
    "first_match",
    "graph_summary",
    "search_nodes",
    "sex_label",
    "truncate_label",
]
