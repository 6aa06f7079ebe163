from __future__ import annotations

from typing import Iterable, List, Optional

from .graph_builder import FamilyGraph, Node

SEX_LABELS = {"M": "Male", "F": "Female"}


def search_nodes(nodes: Iterable[Node], query: str) -> List[Node]:
    """Case-insensitive substring match on display names. A blank query matches everyone."""
    needle = (query or "").strip().lower()
    return [n for n in nodes if not needle or needle in n.name.lower()]


def first_match(nodes: Iterable[Node], query: str) -> Optional[Node]:
    matches = search_nodes(nodes, query)
    return matches[0] if matches else None


def truncate_label(text: str, max_length: int) -> str:
    if not text:
        return ""
    if len(text) <= max_length:
        return text
    return text[: max_length - 2] + "..."


def sex_label(sex: str) -> str:
    return SEX_LABELS.get(sex, sex or "")


def graph_summary(graph: FamilyGraph) -> str:
    return f"{len(graph.nodes)} individuals | {len(graph.links)} connections"
