"""
io.py – readers for the three reference datasets

* borders.txt     – "Country = Neighbour 1,234 km; Other 56 km"
* capdist.csv     – capital-to-capital distances keyed by country code
* state_name.tsv  – country code → display name

Malformed lines are logged and skipped; a file that is missing, lacks its
header columns or yields no usable row raises IngestionError.
"""

from __future__ import annotations

import csv
import logging
import re
from pathlib import Path
from typing import Final, List, Optional, Type, TypeVar

import pandas as pd
from pydantic import BaseModel, ValidationError

from .exceptions import IngestionError
from .models import BorderRecord, CapitalDistanceRecord, CountryCodeRecord

logger = logging.getLogger("roadtrip.io")

R = TypeVar("R", bound=BaseModel)

# ────────────────────────────────────────────────────────────────────────────
CAPDIST_REQUIRED_COLS: Final[List[str]] = ["ida", "idb", "kmdist"]
STATE_NAME_REQUIRED_COLS: Final[List[str]] = ["stateid", "countryname"]

BORDER_SEPARATOR: Final = " = "
_SEGMENT_RE: Final = re.compile(
    r"^(?P<name>.+?)\s+(?P<km>\d[\d,]*(?:\.\d+)?)\s*km\.?$"
)


# ---------------------------------------------------------------------------
def _parse_km(text: str) -> int:
    """'1,234.5' → 1234 (nearest whole km)."""
    return round(float(text.replace(",", "")))


def _existing(path: Path | str) -> Path:
    path = Path(path)
    if not path.is_file():
        raise IngestionError(f"Dataset not found: {path}")
    return path


# ────────────────────────────────────────────────────────────────────────────
# borders.txt
# ────────────────────────────────────────────────────────────────────────────
def parse_border_line(line: str, lineno: int = 0) -> Optional[BorderRecord]:
    """
    Parse one borders line.  Returns None for blank lines.

    A line without neighbours still yields a record so the country becomes
    a (landlocked-by-data) key of the graph.  Segments that don't read as
    "<name> <number> km" are dropped individually.
    """
    line = line.strip()
    if not line:
        return None

    country, sep, rest = line.partition(BORDER_SEPARATOR)
    country = country.strip()
    if not sep:
        # tolerate a trailing " =" with nothing after it
        country = country.rstrip("=").strip()

    borders = []
    for segment in filter(None, (s.strip() for s in rest.split(";"))):
        m = _SEGMENT_RE.match(segment)
        if not m:
            logger.warning("Line %d: skipping unreadable border %r", lineno, segment)
            continue
        borders.append((m["name"].strip(), _parse_km(m["km"])))

    try:
        return BorderRecord(country=country, borders=borders)
    except ValidationError as err:
        logger.warning("Line %d: skipping invalid border record: %s", lineno, err)
        return None


def load_borders(path: Path | str) -> List[BorderRecord]:
    path = _existing(path)
    records: List[BorderRecord] = []
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            record = parse_border_line(line, lineno)
            if record is not None:
                records.append(record)

    if not records:
        raise IngestionError(f"No valid border lines in {path}")

    logger.info("Loaded %d border records from %s", len(records), path.name)
    return records


# ────────────────────────────────────────────────────────────────────────────
# delimited tables
# ────────────────────────────────────────────────────────────────────────────
def _read_table(path: Path, sep: str, required: List[str]) -> pd.DataFrame:
    def _bad_line(fields: List[str]) -> None:
        logger.warning("%s: skipping malformed row %r", path.name, sep.join(fields))
        return None

    try:
        df = pd.read_csv(
            path,
            sep=sep,
            dtype=str,
            keep_default_na=False,
            quoting=csv.QUOTE_NONE,
            engine="python",
            on_bad_lines=_bad_line,
        )
    except pd.errors.EmptyDataError as exc:
        raise IngestionError(f"{path} is empty") from exc

    df.columns = [str(c).strip() for c in df.columns]
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise IngestionError(f"{path.name}: missing columns {missing}")
    return df


def _rows_to_records(df: pd.DataFrame, model: Type[R], source: str) -> List[R]:
    records: List[R] = []
    for lineno, raw in enumerate(df.to_dict(orient="records"), start=2):
        # short rows come back as NaN even with keep_default_na=False
        raw = {k: (None if pd.isna(v) else v) for k, v in raw.items()}
        try:
            records.append(model(**raw))
        except ValidationError as err:
            logger.warning("%s line %d: skipping invalid row: %s", source, lineno, err)

    if not records:
        raise IngestionError(f"No valid rows in {source}")
    return records


def load_capital_distances(path: Path | str) -> List[CapitalDistanceRecord]:
    path = _existing(path)
    df = _read_table(path, ",", CAPDIST_REQUIRED_COLS)
    records = _rows_to_records(df, CapitalDistanceRecord, path.name)
    logger.info("Loaded %d capital distances from %s", len(records), path.name)
    return records


def load_country_codes(path: Path | str) -> List[CountryCodeRecord]:
    path = _existing(path)
    df = _read_table(path, "\t", STATE_NAME_REQUIRED_COLS)
    records = _rows_to_records(df, CountryCodeRecord, path.name)
    logger.info("Loaded %d country codes from %s", len(records), path.name)
    return records


__all__ = [
    "parse_border_line",
    "load_borders",
    "load_capital_distances",
    "load_country_codes",
]
