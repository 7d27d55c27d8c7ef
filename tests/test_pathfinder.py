import itertools

import pytest

from roadtrip import pathfinder
from roadtrip.exceptions import BorderInvariantError
from roadtrip.graph import BorderGraph
from roadtrip.models import PathStep
from roadtrip.pathfinder import shortest_path, total_distance


def test_prefers_two_short_borders_over_one_long(triangle):
    result = shortest_path(triangle, "A", "C")
    assert result.steps == (PathStep("A", "B", 100), PathStep("B", "C", 50))
    assert result.total_km == 150
    assert result.countries == ["A", "B", "C"]
    assert total_distance(triangle, "A", "C") == 150


def test_isolated_country_has_no_route(triangle):
    assert not shortest_path(triangle, "A", "D")
    assert shortest_path(triangle, "A", "D").steps == ()
    assert total_distance(triangle, "A", "D") == -1


def test_same_country(triangle):
    assert shortest_path(triangle, "B", "B").steps == ()
    assert total_distance(triangle, "B", "B") == 0
    assert total_distance(triangle, "D", "D") == 0


def test_unknown_keys_give_empty_result(triangle):
    assert not shortest_path(triangle, "A", "Atlantis")
    assert total_distance(triangle, "Atlantis", "Atlantis") == -1


def test_distance_is_symmetric(triangle):
    for a, b in itertools.permutations(["A", "B", "C"], 2):
        assert total_distance(triangle, a, b) == total_distance(triangle, b, a)


def test_triangle_inequality(triangle):
    keys = ["A", "B", "C"]
    for a, b, c in itertools.permutations(keys, 3):
        assert total_distance(triangle, a, c) <= (
            total_distance(triangle, a, b) + total_distance(triangle, b, c)
        )


def test_disconnected_components():
    graph = BorderGraph.build([
        ("France", [("Spain", 646)]),
        ("Canada", [("United States", 8893)]),
    ])
    assert not shortest_path(graph, "Spain", "Canada")
    assert total_distance(graph, "Spain", "Canada") == -1


def test_equal_length_routes_break_ties_deterministically():
    graph = BorderGraph.build([
        ("A", [("B", 1), ("C", 1)]),
        ("B", [("D", 1)]),
        ("C", [("D", 1)]),
    ])
    routes = {tuple(shortest_path(graph, "A", "D").countries) for _ in range(5)}
    assert routes == {("A", "B", "D")}


def test_repeated_queries_are_identical(triangle):
    first = shortest_path(triangle, "C", "A")
    assert all(shortest_path(triangle, "C", "A") == first for _ in range(3))
    assert triangle.weight("A", "C") == 200


def test_longer_chain():
    graph = BorderGraph.build([
        ("Portugal", [("Spain", 1224)]),
        ("Spain", [("France", 646), ("Andorra", 118)]),
        ("Andorra", [("France", 55)]),
        ("France", [("Germany", 418), ("Belgium", 556)]),
        ("Belgium", [("Germany", 133)]),
    ])
    result = shortest_path(graph, "Portugal", "Germany")
    assert result.countries == ["Portugal", "Spain", "Andorra", "France", "Germany"]
    assert result.total_km == 1224 + 118 + 55 + 418


def test_rebuild_with_missing_edge_fails_loudly(triangle):
    with pytest.raises(BorderInvariantError):
        pathfinder._rebuild(triangle, ["A", "D"])
