"""
pathfinder.py – shortest land route between two countries
────────────────────────────────────────────────────────────────────
Dijkstra over the border graph, weighted by border length in km.
The search stops as soon as the destination is settled; equal-length
frontier entries come out in the order they were pushed, and
neighbours are pushed in graph insertion order, so repeated queries
always return the same route.

Both keys must already be canonical – alias handling lives in
`resolver.py`, not here.

Public symbols
--------------
shortest_path(...)     – PathResult (empty when no route exists)
total_distance(...)    – int, -1 when no route exists
"""
from __future__ import annotations

import logging
from typing import List, Sequence

import networkx as nx

from .exceptions import BorderInvariantError
from .graph import WEIGHT, BorderGraph
from .models import PathResult, PathStep

log = logging.getLogger("roadtrip.pathfinder")


# ────────────────────────────────────────────────────────────────────────────
# internal helpers
# ────────────────────────────────────────────────────────────────────────────
def _rebuild(graph: BorderGraph, nodes: Sequence[str]) -> PathResult:
    """
    Turn the node sequence of a finished search into PathSteps, re-reading
    every segment length from the graph.  A missing edge here is a bug and
    surfaces as BorderInvariantError.
    """
    steps: List[PathStep] = [
        PathStep(u, v, graph.weight(u, v)) for u, v in zip(nodes, nodes[1:])
    ]
    return PathResult(tuple(steps))


# ────────────────────────────────────────────────────────────────────────────
# public API
# ────────────────────────────────────────────────────────────────────────────
def shortest_path(graph: BorderGraph, origin: str, destination: str) -> PathResult:
    """Route from *origin* to *destination*; empty if unreachable or identical."""
    if origin not in graph or destination not in graph:
        log.debug("Unknown key in search %r → %r", origin, destination)
        return PathResult()
    if origin == destination:
        return PathResult()

    try:
        dist, nodes = nx.single_source_dijkstra(
            graph.nx_graph, origin, target=destination, weight=WEIGHT
        )
    except nx.NetworkXNoPath:
        log.debug("No land route %s → %s", origin, destination)
        return PathResult()

    result = _rebuild(graph, nodes)
    if result.total_km != dist:
        raise BorderInvariantError(
            f"route {origin} → {destination} sums to {result.total_km} km, "
            f"search reported {dist} km"
        )
    log.debug("Route %s → %s: %d hops, %d km", origin, destination, len(result), dist)
    return result


def total_distance(graph: BorderGraph, origin: str, destination: str) -> int:
    if origin == destination and origin in graph:
        return 0
    result = shortest_path(graph, origin, destination)
    return result.total_km if result else -1


__all__ = ["shortest_path", "total_distance"]
