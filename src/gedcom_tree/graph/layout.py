"""
Generation-row layout engine.

Rows are generations (top to bottom). Within a row spouses sit next to each
other and everyone else is ordered by display name. A few damped passes
then pull parents toward the mean x of their children and push apart any
neighbours closer than the horizontal spacing.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from gedcom_tree.logging import get_logger

from .generations import DEFAULT_BASE_YEAR, DEFAULT_YEARS_PER_GENERATION, assign_generations, build_adjacency
from .graph_builder import MARRIAGE, FamilyGraph, Node

log = get_logger(__name__)

# --- DEFAULTS ---
H_SPACING = 180.0
V_SPACING = 120.0
REFINEMENT_PASSES = 3
RETAIN_WEIGHT = 0.3


def spouse_lookup(graph: FamilyGraph) -> Dict[str, str]:
    """Map each married person to one spouse; later marriages overwrite earlier ones."""
    spouses: Dict[str, str] = {}
    for link in graph.links_of_type(MARRIAGE):
        spouses[link.source] = link.target
        spouses[link.target] = link.source
    return spouses


def order_row(row: List[Node], spouses: Dict[str, str]) -> List[Node]:
    """Name order, with each person's spouse (if in the same row) placed right after them."""
    by_id = {n.id: n for n in row}
    ordered: List[Node] = []
    placed = set()

    for node in sorted(row, key=lambda n: (n.name, n.id)):
        if node.id in placed:
            continue
        ordered.append(node)
        placed.add(node.id)

        spouse = by_id.get(spouses.get(node.id, ""))
        if spouse is not None and spouse.id not in placed:
            ordered.append(spouse)
            placed.add(spouse.id)

    return ordered


class LayoutEngine:
    def __init__(
        self,
        horizontal_spacing: float = H_SPACING,
        vertical_spacing: float = V_SPACING,
        refinement_passes: int = REFINEMENT_PASSES,
        retain_weight: float = RETAIN_WEIGHT,
        base_year: int = DEFAULT_BASE_YEAR,
        years_per_generation: int = DEFAULT_YEARS_PER_GENERATION,
    ):
        self.horizontal_spacing = float(horizontal_spacing)
        self.vertical_spacing = float(vertical_spacing)
        self.refinement_passes = int(refinement_passes)
        self.retain_weight = float(retain_weight)
        self.base_year = int(base_year)
        self.years_per_generation = int(years_per_generation)

    @classmethod
    def from_config(cls, cfg) -> "LayoutEngine":
        layout = getattr(cfg, "layout", {}) or {}
        generations = getattr(cfg, "generations", {}) or {}
        return cls(
            horizontal_spacing=layout.get("horizontal_spacing", H_SPACING),
            vertical_spacing=layout.get("vertical_spacing", V_SPACING),
            refinement_passes=layout.get("refinement_passes", REFINEMENT_PASSES),
            retain_weight=layout.get("retain_weight", RETAIN_WEIGHT),
            base_year=generations.get("base_year", DEFAULT_BASE_YEAR),
            years_per_generation=generations.get("years_per_generation", DEFAULT_YEARS_PER_GENERATION),
        )

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def run(self, graph: FamilyGraph, generations: Optional[Dict[str, int]] = None) -> Dict[str, int]:
        """
        Assign generations (unless given) and coordinates to every node.

        Returns the generation map.
        """
        if generations is None:
            generations = assign_generations(
                graph,
                base_year=self.base_year,
                years_per_generation=self.years_per_generation,
            )
        else:
            for node in graph.nodes:
                node.generation = generations.get(node.id, 0)

        self.layout(graph)
        return generations

    def layout(self, graph: FamilyGraph) -> List[List[Node]]:
        """Compute x/y from the nodes' current generations. Returns the rows."""
        if not graph.nodes:
            return []

        rows = self._initial_rows(graph)

        _, children_of = build_adjacency(graph)
        for _ in range(self.refinement_passes):
            self._pull_parents(rows, graph, children_of)
            rows = [self._resolve_overlaps(row) for row in rows]

        self._center(graph.nodes)

        log.debug(
            "Layout complete: rows=%d nodes=%d passes=%d",
            len(rows),
            len(graph.nodes),
            self.refinement_passes,
        )
        return rows

    # ------------------------------------------------------------------ #
    # Steps
    # ------------------------------------------------------------------ #

    def _initial_rows(self, graph: FamilyGraph) -> List[List[Node]]:
        by_gen: Dict[int, List[Node]] = {}
        for node in graph.nodes:
            by_gen.setdefault(node.generation, []).append(node)

        spouses = spouse_lookup(graph)
        rows: List[List[Node]] = []

        for row_index, gen in enumerate(sorted(by_gen)):
            row = order_row(by_gen[gen], spouses)
            offset = (len(row) - 1) * self.horizontal_spacing / 2
            for i, node in enumerate(row):
                node.x = i * self.horizontal_spacing - offset
                node.y = row_index * self.vertical_spacing
            rows.append(row)

        return rows

    def _pull_parents(
        self,
        rows: List[List[Node]],
        graph: FamilyGraph,
        children_of: Dict[str, List[str]],
    ) -> None:
        pull = 1.0 - self.retain_weight
        for row in rows:
            for node in row:
                kids = [graph.node(c) for c in children_of.get(node.id, [])]
                kids = [k for k in kids if k is not None]
                if not kids:
                    continue
                mean_x = sum(k.x for k in kids) / len(kids)
                node.x = self.retain_weight * node.x + pull * mean_x

    def _resolve_overlaps(self, row: List[Node]) -> List[Node]:
        row = sorted(row, key=lambda n: n.x)
        for prev, node in zip(row, row[1:]):
            if node.x - prev.x < self.horizontal_spacing:
                node.x = prev.x + self.horizontal_spacing
        return row

    @staticmethod
    def _center(nodes: List[Node]) -> None:
        min_x = min(n.x for n in nodes)
        max_x = max(n.x for n in nodes)
        shift = -(min_x + max_x) / 2
        for node in nodes:
            node.x += shift


def layout_graph(graph: FamilyGraph, cfg=None) -> Dict[str, int]:
    """Generations + coordinates with settings from ``cfg`` (or defaults)."""
    engine = LayoutEngine.from_config(cfg) if cfg is not None else LayoutEngine()
    return engine.run(graph)
