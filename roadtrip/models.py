"""Core records and result types: border rows, path steps, query outcomes."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, field_validator


# ────────────────────────────────────────────────────────────────────────────
# ingested records
# ────────────────────────────────────────────────────────────────────────────
class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, validate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def _strip_strings(cls, v):
        return v.strip() if isinstance(v, str) else v


class BorderRecord(_Record):
    """
    One line of the borders file: a country and the land borders it
    declares.  The reverse direction is *not* implied by the record itself;
    the graph builder adds it.
    """

    country: str = Field(..., min_length=1)
    borders: List[Tuple[str, NonNegativeInt]] = Field(default_factory=list)

    @field_validator("borders")
    @classmethod
    def _no_blank_neighbours(cls, v):
        for name, _ in v:
            if not name.strip():
                raise ValueError("neighbour name is blank")
        return v


class CapitalDistanceRecord(_Record):
    """Capital-to-capital distance between two country codes (ordered)."""

    code_a: str = Field(..., min_length=1, alias="ida")
    code_b: str = Field(..., min_length=1, alias="idb")
    km: NonNegativeInt = Field(..., alias="kmdist")

    @field_validator("km", mode="before")
    @classmethod
    def _round_km(cls, v):
        # capdist rows occasionally carry a decimal part
        if isinstance(v, str) and v.strip():
            return round(float(v.replace(",", "")))
        return v


class CountryCodeRecord(_Record):
    code: str = Field(..., min_length=1, alias="stateid")
    name: str = Field(..., min_length=1, alias="countryname")


# ────────────────────────────────────────────────────────────────────────────
# path results
# ────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class PathStep:
    """One hop of a route: crossing from one country into a neighbour."""

    from_key: str
    to_key: str
    km: int

    def __post_init__(self):
        if self.km < 0:
            raise ValueError("border length must be non-negative")
        if self.from_key == self.to_key:
            raise ValueError("a step must cross into a different country")


@dataclass(frozen=True)
class PathResult:
    """
    Ordered hops from origin to destination.

    An empty result means either "no route" or "origin is the
    destination"; the query facade tells the two apart.
    """

    steps: Tuple[PathStep, ...] = ()
    total_km: int = field(init=False)

    def __post_init__(self):
        steps = tuple(self.steps)
        for prev, nxt in zip(steps, steps[1:]):
            if prev.to_key != nxt.from_key:
                raise ValueError(f"broken route: {prev.to_key} ≠ {nxt.from_key}")
        object.__setattr__(self, "steps", steps)
        object.__setattr__(self, "total_km", sum(s.km for s in steps))

    def __bool__(self) -> bool:
        return bool(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self):
        return iter(self.steps)

    @property
    def countries(self) -> List[str]:
        """Every country visited, origin first."""
        if not self.steps:
            return []
        return [self.steps[0].from_key] + [s.to_key for s in self.steps]


class QueryStatus(Enum):
    OK = "ok"
    SAME_COUNTRY = "same_country"
    NOT_FOUND = "not_found"
    NO_PATH = "no_path"


@dataclass(frozen=True)
class RouteQuery:
    """Outcome of a facade query, keeping NOT_FOUND and NO_PATH apart."""

    origin_name: str
    destination_name: str
    origin: Optional[str]
    destination: Optional[str]
    status: QueryStatus
    path: PathResult = field(default_factory=PathResult)

    @property
    def found(self) -> bool:
        return self.status in (QueryStatus.OK, QueryStatus.SAME_COUNTRY)

    @property
    def distance(self) -> int:
        """Total km, 0 for the same country, -1 for any failure."""
        if self.status is QueryStatus.OK:
            return self.path.total_km
        if self.status is QueryStatus.SAME_COUNTRY:
            return 0
        return -1
