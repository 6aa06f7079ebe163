"""
Generation assignment over parent-child links.

Roots (individuals without a recorded parent) start at generation 0 and a
breadth-first walk pushes every child to one more than its parent, always
keeping the deepest value seen. Individuals the walk never reaches get an
estimate from their birth year. Values are then shifted so the smallest
generation is 0.
"""

from __future__ import annotations

import re
from collections import deque
from typing import Dict, List, Optional, Tuple

from gedcom_tree.logging import get_logger

from .graph_builder import PARENT_CHILD, FamilyGraph, Node

log = get_logger(__name__)

_YEAR_RE = re.compile(r"\b(\d{3,4})\b", re.ASCII)

DEFAULT_BASE_YEAR = 1000
DEFAULT_YEARS_PER_GENERATION = 30


def build_adjacency(graph: FamilyGraph) -> Tuple[Dict[str, List[str]], Dict[str, List[str]]]:
    """Return ``(child -> parents, parent -> children)`` from parent-child links."""
    parents_of: Dict[str, List[str]] = {}
    children_of: Dict[str, List[str]] = {}

    for link in graph.links_of_type(PARENT_CHILD):
        parents_of.setdefault(link.target, []).append(link.source)
        children_of.setdefault(link.source, []).append(link.target)

    return parents_of, children_of


def birth_year(node: Node) -> Optional[int]:
    """First 3-4 digit number in the birth date, e.g. "ABT 1850" -> 1850."""
    date = node.birth.date if node.birth else ""
    match = _YEAR_RE.search(date or "")
    return int(match.group(1)) if match else None


def estimate_generation(
    node: Node,
    base_year: int = DEFAULT_BASE_YEAR,
    years_per_generation: int = DEFAULT_YEARS_PER_GENERATION,
) -> int:
    """
    Rough generation from the birth year, floored at 0.

    NOTE: the base year and generation length are a tunable heuristic, not
    a genealogical rule.
    """
    year = birth_year(node)
    if year is None:
        return 0
    return max(0, (year - base_year) // years_per_generation)


def assign_generations(
    graph: FamilyGraph,
    base_year: int = DEFAULT_BASE_YEAR,
    years_per_generation: int = DEFAULT_YEARS_PER_GENERATION,
) -> Dict[str, int]:
    """
    Compute a generation for every node and write it to ``node.generation``.

    Returns the generation map keyed by node id.
    """
    parents_of, children_of = build_adjacency(graph)
    generations: Dict[str, int] = {}

    roots = [n.id for n in graph.nodes if n.id not in parents_of]
    queue = deque(roots)
    for root in roots:
        generations[root] = 0

    # Longest simple path is shorter than the node count; deeper values can
    # only come from a parent-child cycle.
    ceiling = len(graph.nodes)

    while queue:
        current = queue.popleft()
        child_gen = generations[current] + 1
        if child_gen > ceiling:
            continue

        for child in children_of.get(current, []):
            known = generations.get(child)
            if known is None or child_gen > known:
                generations[child] = child_gen
                queue.append(child)

    unreached = [n for n in graph.nodes if n.id not in generations]
    for node in unreached:
        generations[node.id] = estimate_generation(node, base_year, years_per_generation)
    if unreached:
        log.debug("Estimated generation from birth year for %d individuals", len(unreached))

    if generations:
        lowest = min(generations.values())
        if lowest:
            generations = {node_id: gen - lowest for node_id, gen in generations.items()}

    for node in graph.nodes:
        node.generation = generations[node.id]

    return generations
