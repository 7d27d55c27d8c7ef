"""
resolver.py – map what a user types to the border graph's key

Checks run in a fixed order and the first hit wins:

1. case-insensitive exact match against the graph's keys,
2. the alias table (alias spellings are matched case-sensitively),
3. the "United States" / "US" pair, which the datasets spell both ways.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping, Optional

from .graph import BorderGraph

# alias → canonical key
ALIASES: Final[Mapping[str, str]] = MappingProxyType({
    "Turkiye": "Turkey",
    "Holy See": "Vatican City",
    "Greenland": "Denmark",
    "Keeling": "Cocos (Keeling)",
    "Islas Malvinas": "Falkland Islands",
    "Kaliningrad": "Russia",
    "Ceuta": "Spain",
    # kept verbatim from the reference data although it reads inverted
    "France": "Saint Martin",
})

US_NAMES: Final = ("United States", "US")


def _us_alternate(name: str) -> Optional[str]:
    long_name, short_name = US_NAMES
    folded = name.casefold()
    if folded == long_name.casefold():
        return short_name
    if folded == short_name.casefold():
        return long_name
    return None


def resolve(graph: BorderGraph, name: Optional[str]) -> Optional[str]:
    """Return the canonical key for *name*, or None when nothing matches."""
    if not name:
        return None
    candidate = name.strip()
    if not candidate:
        return None

    key = graph.lookup_casefold(candidate)
    if key is not None:
        return key

    target = ALIASES.get(candidate)
    if target is not None and target in graph:
        return target

    alternate = _us_alternate(candidate)
    if alternate is not None and alternate in graph:
        return alternate

    return None


def is_valid(graph: BorderGraph, name: Optional[str]) -> bool:
    return resolve(graph, name) is not None


__all__ = ["ALIASES", "US_NAMES", "resolve", "is_valid"]
