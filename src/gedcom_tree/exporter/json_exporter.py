"""
json_exporter.py
JSON export of a laid-out family graph.

Output shape:

    {
        "summary": "3 individuals | 4 connections",
        "counts": {...},
        "nodes": [{"id", "name", ..., "x", "y", "generation", "alternate_names"}],
        "links": [{"source", "target", "type", "family_id"}],
        "generations": {"@I1@": 0, ...},
        "dropped_references": [...],
        "header": [...]
    }

Nodes are exported without their back-reference to the full individual.
"""

from __future__ import annotations

import json
from dataclasses import asdict, fields, is_dataclass
from pathlib import Path
from typing import Any, Dict

from gedcom_tree.graph.graph_builder import MARRIAGE, PARENT_CHILD, Node
from gedcom_tree.graph.queries import graph_summary
from gedcom_tree.logging import get_logger

log = get_logger(__name__)


def _to_json_compatible(obj: Any) -> Any:
    """
    Recursively convert objects into JSON-compatible structures.

    Rules:
    - Primitives pass through
    - dataclasses -> dict (recursively)
    - dict -> dict (recursively)
    - list / tuple / set -> list (recursively)
    - Unknown objects -> str(obj)
    """
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if is_dataclass(obj) and not isinstance(obj, type):
        return {k: _to_json_compatible(v) for k, v in asdict(obj).items()}

    if isinstance(obj, dict):
        return {str(k): _to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple, set)):
        return [_to_json_compatible(v) for v in obj]

    return str(obj)


def node_to_dict(node: Node) -> Dict[str, Any]:
    out = {
        f.name: _to_json_compatible(getattr(node, f.name))
        for f in fields(node)
        if f.name != "data"
    }
    out["alternate_names"] = list(node.data.alternate_names) if node.data else []
    return out


def graph_to_dict(result: Any) -> Dict[str, Any]:
    """
    Convert a LayoutResult into a JSON-safe dict.
    """
    graph = result.graph
    document = result.document

    return {
        "summary": graph_summary(graph),
        "counts": {
            "individuals": len(document.individuals),
            "families": len(document.families),
            "marriage_links": len(graph.links_of_type(MARRIAGE)),
            "parent_child_links": len(graph.links_of_type(PARENT_CHILD)),
            "generations": len(set(result.generations.values())),
        },
        "nodes": [node_to_dict(n) for n in graph.nodes],
        "links": [_to_json_compatible(link) for link in graph.links],
        "generations": dict(result.generations),
        "dropped_references": [_to_json_compatible(d) for d in graph.dropped_references],
        "header": [_to_json_compatible(e) for e in document.header.entries],
    }


def serialize_graph_to_json_string(result: Any, indent: int | None = 2) -> str:
    if indent is None:
        return json.dumps(graph_to_dict(result), separators=(",", ":"), ensure_ascii=False)
    return json.dumps(graph_to_dict(result), indent=indent, ensure_ascii=False)


def export_graph_json(result: Any, output_path: str | Path, indent: int | None = 2) -> None:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    log.info(
        "Exporting layout JSON to: %s (nodes=%d, links=%d)",
        output_path,
        len(result.graph.nodes),
        len(result.graph.links),
    )

    json_str = serialize_graph_to_json_string(result, indent=indent)

    with output_path.open("w", encoding="utf-8") as f:
        f.write(json_str)

    size_bytes = output_path.stat().st_size
    log.info("JSON export complete. size=%d bytes", size_bytes)
