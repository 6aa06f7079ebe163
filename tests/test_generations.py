import pytest

from gedcom_tree.graph import FamilyGraph, Link, Node, PARENT_CHILD, assign_generations, build_graph, estimate_generation
from gedcom_tree.loader import parse_gedcom
from gedcom_tree.registry import Event


def _graph(node_ids, edges, births=None):
    births = births or {}
    graph = FamilyGraph()
    for node_id in node_ids:
        birth = Event(date=births[node_id]) if node_id in births else None
        graph.add_node(Node(id=node_id, name=node_id, birth=birth))
    for parent, child in edges:
        graph.add_link(Link(parent, child, PARENT_CHILD, "@F@"))
    return graph


def test_parent_and_child_generations():
    text = (
        "0 @I1@ INDI\n1 BIRT\n2 DATE 1 JAN 1900\n"
        "0 @I2@ INDI\n"
        "0 @F1@ FAM\n1 HUSB @I1@\n1 CHIL @I2@\n"
    )
    graph = build_graph(parse_gedcom(text))
    generations = assign_generations(graph)

    assert generations == {"@I1@": 0, "@I2@": 1}
    assert graph.node("@I2@").generation == 1


def test_mock_file_generations(family_text):
    generations = assign_generations(build_graph(parse_gedcom(family_text)))

    assert generations == {
        "@I1@": 0,
        "@I2@": 0,
        "@I3@": 1,
        "@I4@": 0,
        "@I5@": 1,
        "@I6@": 2,
        "@I7@": 0,
    }


def test_deepest_path_wins():
    # R -> A -> C (length 2) and R -> B -> D -> C (length 3)
    graph = _graph(
        ["R", "A", "B", "C", "D"],
        [("R", "A"), ("A", "C"), ("R", "B"), ("B", "D"), ("D", "C")],
    )
    generations = assign_generations(graph)

    assert generations["C"] == 3
    assert generations["D"] == 2


def test_reassignment_propagates_to_descendants():
    # C is first reached at 1, later at 2; its child must follow to 3.
    graph = _graph(
        ["R", "A", "C", "K"],
        [("R", "C"), ("R", "A"), ("A", "C"), ("C", "K")],
    )
    generations = assign_generations(graph)

    assert generations["C"] == 2
    assert generations["K"] == 3


def test_disconnected_cycle_uses_birth_year_fallback():
    # X and Y are each other's parent, so neither is a root.
    graph = _graph(["R", "X", "Y"], [("X", "Y"), ("Y", "X")], births={"X": "ABT 1630", "Y": "1 MAY 1700"})
    generations = assign_generations(graph)

    assert generations == {"R": 0, "X": 21, "Y": 23}


def test_cycle_reachable_from_root_terminates():
    graph = _graph(["R", "A", "B"], [("R", "A"), ("A", "B"), ("B", "A")])
    generations = assign_generations(graph)

    assert generations["R"] == 0
    assert all(g <= len(graph.nodes) for g in generations.values())


def test_minimum_generation_is_normalized_to_zero():
    # Only a cycle: no roots, all generations come from birth years.
    graph = _graph(["X", "Y"], [("X", "Y"), ("Y", "X")], births={"X": "1900", "Y": "1960"})
    generations = assign_generations(graph)

    assert min(generations.values()) == 0
    assert generations == {"X": 0, "Y": 2}


@pytest.mark.parametrize(
    "date, expected",
    [
        ("1 JAN 1900", 30),
        ("ABT 1630", 21),
        ("850", 0),
        ("12 MAR 20245", 0),
        ("", 0),
        ("unknown", 0),
    ],
)
def test_estimate_generation(date, expected):
    assert estimate_generation(Node(id="X", name="X", birth=Event(date=date))) == expected


def test_estimate_generation_is_tunable():
    node = Node(id="X", name="X", birth=Event(date="1900"))
    assert estimate_generation(node, base_year=1800, years_per_generation=25) == 4


def test_empty_graph():
    assert assign_generations(FamilyGraph()) == {}
