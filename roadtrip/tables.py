"""Auxiliary lookups: capital-to-capital distances and country codes.

Neither table feeds the route search; they are loaded alongside the border
graph so callers can look values up by country code.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from .models import CapitalDistanceRecord, CountryCodeRecord

log = logging.getLogger("roadtrip.tables")


class CapitalDistances:
    """(code_a, code_b) → km.  Pairs are ordered; no mirroring is applied."""

    def __init__(self, distances: Mapping[Tuple[str, str], int]):
        self._distances = MappingProxyType(dict(distances))

    @classmethod
    def from_records(cls, records: Iterable[CapitalDistanceRecord]) -> "CapitalDistances":
        table: Dict[Tuple[str, str], int] = {}
        for rec in records:
            table[(rec.code_a, rec.code_b)] = rec.km
        return cls(table)

    def get(self, code_a: str, code_b: str) -> Optional[int]:
        return self._distances.get((code_a, code_b))

    def __contains__(self, pair: object) -> bool:
        return pair in self._distances

    def __len__(self) -> int:
        return len(self._distances)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self._distances)


class CountryCodes:
    """code → display name, plus a case-insensitive reverse lookup."""

    def __init__(self, names: Mapping[str, str]):
        self._names = MappingProxyType(dict(names))
        by_name: Dict[str, List[str]] = {}
        for code, name in self._names.items():
            by_name.setdefault(name.casefold(), []).append(code)
        self._codes = MappingProxyType({k: tuple(v) for k, v in by_name.items()})

    @classmethod
    def from_records(cls, records: Iterable[CountryCodeRecord]) -> "CountryCodes":
        table: Dict[str, str] = {}
        for rec in records:
            if rec.code in table and table[rec.code] != rec.name:
                log.debug("Code %s renamed %s → %s", rec.code, table[rec.code], rec.name)
            table[rec.code] = rec.name
        return cls(table)

    def name_for(self, code: str) -> Optional[str]:
        return self._names.get(code)

    def codes_for(self, name: str) -> Tuple[str, ...]:
        return self._codes.get(name.strip().casefold(), ())

    def __contains__(self, code: object) -> bool:
        return code in self._names

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)


__all__ = ["CapitalDistances", "CountryCodes"]
