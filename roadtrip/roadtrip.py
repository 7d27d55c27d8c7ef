"""
roadtrip.py – query facade over the border graph

`RoadTrip` owns the immutable tables built at start-up and answers
name-based queries: names are resolved first, then the canonical keys
go to the path finder.  Every call is an independent search.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from . import io, pathfinder, resolver
from .config import RoadTripConfig
from .graph import BorderGraph, RawRecord
from .models import (
    BorderRecord,
    CapitalDistanceRecord,
    CountryCodeRecord,
    PathResult,
    QueryStatus,
    RouteQuery,
)
from .tables import CapitalDistances, CountryCodes

log = logging.getLogger("roadtrip")


class RoadTrip:
    """Country-to-country land routes plus the auxiliary code tables."""

    def __init__(
        self,
        graph: BorderGraph,
        capital_distances: Optional[CapitalDistances] = None,
        country_codes: Optional[CountryCodes] = None,
    ):
        self.graph = graph
        self.capital_distances = capital_distances or CapitalDistances({})
        self.country_codes = country_codes or CountryCodes({})

    # ── construction ──────────────────────────────────────────────────
    @classmethod
    def from_records(
        cls,
        borders: Iterable[Union[BorderRecord, RawRecord]],
        capital_distances: Iterable[CapitalDistanceRecord] = (),
        country_codes: Iterable[CountryCodeRecord] = (),
    ) -> "RoadTrip":
        return cls(
            BorderGraph.build(borders),
            CapitalDistances.from_records(capital_distances),
            CountryCodes.from_records(country_codes),
        )

    @classmethod
    def from_files(
        cls,
        borders_path: Union[str, Path],
        capdist_path: Union[str, Path],
        state_name_path: Union[str, Path],
    ) -> "RoadTrip":
        trip = cls.from_records(
            io.load_borders(borders_path),
            io.load_capital_distances(capdist_path),
            io.load_country_codes(state_name_path),
        )
        log.info("Ready: %r", trip.graph)
        return trip

    @classmethod
    def from_config(cls, config: RoadTripConfig) -> "RoadTrip":
        return cls.from_files(*config.dataset_paths)

    # ── name handling ─────────────────────────────────────────────────
    def resolve(self, name: Optional[str]) -> Optional[str]:
        return resolver.resolve(self.graph, name)

    def is_valid(self, name: Optional[str]) -> bool:
        return resolver.is_valid(self.graph, name)

    # ── routes ────────────────────────────────────────────────────────
    def query(self, name1: str, name2: str) -> RouteQuery:
        origin = self.resolve(name1)
        destination = self.resolve(name2)

        def _outcome(status: QueryStatus, path: PathResult = PathResult()) -> RouteQuery:
            return RouteQuery(name1, name2, origin, destination, status, path)

        if origin is None or destination is None:
            return _outcome(QueryStatus.NOT_FOUND)
        if origin == destination:
            return _outcome(QueryStatus.SAME_COUNTRY)

        path = pathfinder.shortest_path(self.graph, origin, destination)
        return _outcome(QueryStatus.OK if path else QueryStatus.NO_PATH, path)

    def find_path(self, name1: str, name2: str) -> PathResult:
        return self.query(name1, name2).path

    def get_distance(self, name1: str, name2: str) -> int:
        """Total border km along the route; -1 for unknown names or no route."""
        return self.query(name1, name2).distance

    # ── auxiliary lookups ─────────────────────────────────────────────
    def capital_distance(self, code_a: str, code_b: str) -> Optional[int]:
        return self.capital_distances.get(code_a, code_b)

    def country_name(self, code: str) -> Optional[str]:
        return self.country_codes.name_for(code)


__all__ = ["RoadTrip"]
