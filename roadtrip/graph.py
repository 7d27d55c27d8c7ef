"""
graph.py – undirected land-border graph
────────────────────────────────────────────────────────────────────
The borders file only states a border on the line of the country that
declares it.  `BorderGraph.build()` symmetrises while loading, so every
query afterwards can read adjacency from either side.

Public symbols
--------------
BorderGraph            – frozen networkx graph keyed by country name
"""
from __future__ import annotations

import logging
from typing import Dict, FrozenSet, Iterable, Iterator, Optional, Tuple, Union

import networkx as nx

from .exceptions import BorderInvariantError
from .models import BorderRecord

log = logging.getLogger("roadtrip.graph")

WEIGHT = "km"

RawRecord = Tuple[str, Iterable[Tuple[str, int]]]


def _unpack(record: Union[BorderRecord, RawRecord]) -> RawRecord:
    if isinstance(record, BorderRecord):
        return record.country, record.borders
    country, borders = record
    return country, borders


class BorderGraph:
    """
    Read-only adjacency of countries sharing a land border.

    Build it with :meth:`build`; the wrapped ``nx.Graph`` is frozen, so any
    attempt to add or drop an edge afterwards raises ``nx.NetworkXError``.
    """

    def __init__(self, graph: nx.Graph):
        if graph.is_directed():
            raise TypeError("BorderGraph needs an undirected graph")
        self._graph = nx.freeze(graph)
        # first spelling wins when two keys only differ by case
        self._casefold: Dict[str, str] = {}
        for key in graph.nodes:
            self._casefold.setdefault(key.casefold(), key)

    # ── construction ──────────────────────────────────────────────────
    @classmethod
    def build(cls, records: Iterable[Union[BorderRecord, RawRecord]]) -> "BorderGraph":
        G = nx.Graph()
        for record in records:
            country, borders = _unpack(record)
            G.add_node(country)
            for neighbour, km in borders:
                if km < 0:
                    raise ValueError(f"negative border length {km} for {country}–{neighbour}")
                if neighbour == country:
                    log.warning("Ignoring self-border on %s", country)
                    continue
                if G.has_edge(country, neighbour):
                    previous = G.edges[country, neighbour][WEIGHT]
                    if previous != km:
                        log.warning(
                            "Border %s–%s restated: %d km replaces %d km",
                            country, neighbour, km, previous,
                        )
                G.add_edge(country, neighbour, **{WEIGHT: km})

        log.info(
            "Border graph built: %d countries, %d borders",
            G.number_of_nodes(), G.number_of_edges(),
        )
        return cls(G)

    # ── queries ───────────────────────────────────────────────────────
    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key in self._graph

    def __len__(self) -> int:
        return self._graph.number_of_nodes()

    def __iter__(self) -> Iterator[str]:
        return iter(self._graph.nodes)

    def contains(self, key: str) -> bool:
        return key in self

    @property
    def keys(self) -> Tuple[str, ...]:
        return tuple(self._graph.nodes)

    @property
    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    @property
    def nx_graph(self) -> nx.Graph:
        """The frozen underlying graph (weights under the ``"km"`` attribute)."""
        return self._graph

    def neighbors(self, key: str) -> FrozenSet[Tuple[str, int]]:
        """(neighbour, km) pairs for *key*; empty for unknown keys."""
        if key not in self:
            return frozenset()
        return frozenset(
            (nbr, data[WEIGHT]) for nbr, data in self._graph.adj[key].items()
        )

    def weight(self, a: str, b: str) -> int:
        try:
            return self._graph.edges[a, b][WEIGHT]
        except KeyError:
            raise BorderInvariantError(f"no border recorded between {a!r} and {b!r}") from None

    def lookup_casefold(self, name: str) -> Optional[str]:
        """Canonical key matching *name* ignoring case, or None."""
        return self._casefold.get(name.casefold())

    def __repr__(self) -> str:
        return f"BorderGraph({len(self)} countries, {self.edge_count} borders)"


__all__ = ["BorderGraph", "WEIGHT"]
