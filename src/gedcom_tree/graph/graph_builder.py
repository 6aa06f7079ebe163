"""
Relationship graph for layout and rendering.

Defines:
- Node / Link data models
- FamilyGraph container
- build_graph(): individuals -> nodes, families -> marriage and
  parent-child links

References that do not resolve to a node are dropped and kept as
diagnostics in ``FamilyGraph.dropped_references``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Literal, Optional

from gedcom_tree.logging import get_logger
from gedcom_tree.registry.entities import Event, GedcomDocument, Individual

log = get_logger(__name__)


# ======================================================================
# NODE & LINK DATA MODELS
# ======================================================================

LinkType = Literal["marriage", "parent-child"]

MARRIAGE: LinkType = "marriage"
PARENT_CHILD: LinkType = "parent-child"

UNKNOWN_NAME = "Unknown"


@dataclass(eq=False)
class Node:
    """
    One individual in the layout graph.

    ``x``, ``y`` and ``generation`` are written by the layout stage only.
    """
    id: str
    name: str
    sex: str = ""
    birth: Optional[Event] = None
    death: Optional[Event] = None
    lifespan: str = ""
    nationality: str = ""
    occupation: str = ""
    titles: List[str] = field(default_factory=list)
    data: Optional[Individual] = field(default=None, repr=False)

    x: float = 0.0
    y: float = 0.0
    generation: int = 0


@dataclass(frozen=True)
class Link:
    source: str
    target: str
    type: LinkType
    family_id: str


@dataclass(frozen=True)
class DroppedReference:
    """A family reference (husband, wife or child) with no matching individual."""
    family_id: str
    role: str
    xref: str


@dataclass
class FamilyGraph:
    nodes: List[Node] = field(default_factory=list)
    links: List[Link] = field(default_factory=list)
    dropped_references: List[DroppedReference] = field(default_factory=list)

    _index: Dict[str, Node] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self._index = {n.id: n for n in self.nodes}

    def add_node(self, node: Node) -> None:
        self.nodes.append(node)
        self._index[node.id] = node

    def add_link(self, link: Link) -> None:
        self.links.append(link)

    def node(self, node_id: str) -> Optional[Node]:
        return self._index.get(node_id)

    def links_of_type(self, link_type: LinkType) -> List[Link]:
        return [link for link in self.links if link.type == link_type]


# ======================================================================
# DISPLAY HELPERS
# ======================================================================

def display_name(individual: Optional[Individual]) -> str:
    """Primary name's full string, then its given name, then "Unknown"."""
    if individual is None or not individual.names:
        return UNKNOWN_NAME
    name = individual.names[0]
    return name.full or name.given or UNKNOWN_NAME


def lifespan(individual: Optional[Individual]) -> str:
    """'<birth> - <death>' with '?' for a missing birth; '' if neither is known."""
    if individual is None:
        return ""

    birth = individual.birth.date if individual.birth else ""
    death = individual.death.date if individual.death else ""

    if birth or death:
        return f"{birth or '?'} - {death or ''}"
    return ""


def node_from_individual(individual: Individual) -> Node:
    return Node(
        id=individual.id,
        name=display_name(individual),
        sex=individual.sex,
        birth=individual.birth,
        death=individual.death,
        lifespan=lifespan(individual),
        nationality=individual.nationality,
        occupation=individual.occupation,
        titles=individual.titles,
        data=individual,
    )


# ======================================================================
# GRAPH CONSTRUCTION
# ======================================================================

def build_graph(document: GedcomDocument) -> FamilyGraph:
    """
    Derive the relationship graph from finalized collections.

    - one node per individual, in document order
    - one marriage link per family whose husband and wife both resolve
    - one parent-child link per (resolved parent, resolved child)
    """
    graph = FamilyGraph()

    for individual in document.individuals.values():
        graph.add_node(node_from_individual(individual))

    for fam_id, family in document.families.items():
        husband = graph.node(family.husband) if family.husband else None
        wife = graph.node(family.wife) if family.wife else None

        if family.husband and husband is None:
            graph.dropped_references.append(DroppedReference(fam_id, "HUSB", family.husband))
        if family.wife and wife is None:
            graph.dropped_references.append(DroppedReference(fam_id, "WIFE", family.wife))

        if husband is not None and wife is not None:
            graph.add_link(Link(husband.id, wife.id, MARRIAGE, fam_id))

        for child_id in family.children:
            child = graph.node(child_id)
            if child is None:
                graph.dropped_references.append(DroppedReference(fam_id, "CHIL", child_id))
                continue
            for parent in (husband, wife):
                if parent is not None:
                    graph.add_link(Link(parent.id, child.id, PARENT_CHILD, fam_id))

    if graph.dropped_references:
        log.debug("Dropped %d dangling family references", len(graph.dropped_references))

    log.debug("Graph built: nodes=%d links=%d", len(graph.nodes), len(graph.links))
    return graph
