import logging

import networkx as nx
import pytest

from roadtrip.exceptions import BorderInvariantError
from roadtrip.graph import BorderGraph
from roadtrip.models import BorderRecord


def test_one_sided_records_are_symmetrised():
    records = [
        ("France", [("Spain", 646), ("Belgium", 556)]),
        ("Spain", [("Portugal", 1224)]),
    ]
    graph = BorderGraph.build(records)

    for country, borders in records:
        for neighbour, km in borders:
            assert (neighbour, km) in graph.neighbors(country)
            assert (country, km) in graph.neighbors(neighbour)

    assert graph.neighbors("Portugal") == frozenset({("Spain", 1224)})
    assert graph.edge_count == 3


def test_country_without_neighbours_is_a_key(triangle):
    assert "D" in triangle
    assert triangle.contains("D")
    assert triangle.neighbors("D") == frozenset()
    assert len(triangle) == 4


def test_unknown_key_has_no_neighbours(triangle):
    assert triangle.neighbors("Atlantis") == frozenset()
    assert not triangle.contains("Atlantis")


def test_restated_border_last_write_wins(caplog):
    with caplog.at_level(logging.WARNING, logger="roadtrip.graph"):
        graph = BorderGraph.build([
            ("A", [("B", 10)]),
            ("B", [("A", 20)]),
        ])
    assert graph.weight("A", "B") == 20
    assert graph.weight("B", "A") == 20
    assert graph.edge_count == 1
    assert "restated" in caplog.text


def test_matching_restatement_is_silent(caplog):
    with caplog.at_level(logging.WARNING, logger="roadtrip.graph"):
        BorderGraph.build([("A", [("B", 10)]), ("B", [("A", 10)])])
    assert "restated" not in caplog.text


def test_self_border_is_ignored():
    graph = BorderGraph.build([("A", [("A", 5), ("B", 1)])])
    assert graph.neighbors("A") == frozenset({("B", 1)})


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        BorderGraph.build([("A", [("B", -1)])])


def test_accepts_border_records():
    graph = BorderGraph.build([BorderRecord(country="Turkey", borders=[("Greece", 192)])])
    assert graph.weight("Greece", "Turkey") == 192


def test_graph_is_frozen(triangle):
    with pytest.raises(nx.NetworkXError):
        triangle.nx_graph.add_edge("A", "D", km=1)
    assert triangle.neighbors("D") == frozenset()


def test_missing_edge_weight_is_an_invariant_error(triangle):
    with pytest.raises(BorderInvariantError):
        triangle.weight("A", "D")


def test_casefold_lookup_prefers_first_spelling():
    graph = BorderGraph.build([("Congo", []), ("CONGO", [])])
    assert graph.lookup_casefold("congo") == "Congo"
    assert graph.lookup_casefold("Narnia") is None


def test_directed_graph_rejected():
    with pytest.raises(TypeError):
        BorderGraph(nx.DiGraph())
