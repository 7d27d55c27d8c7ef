"""
roadtrip – shortest land routes between countries
Top-level package.  Exposes the query facade, the default dataset
locations and the package logger every sub-module hangs off.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Final

__all__ = [
    "logger",
    "LOG_LEVEL",
    "PROJECT_ROOT",
    "DATA_DIR",
    "RoadTrip",
]

# ---------- paths ----------
PROJECT_ROOT: Final[Path] = Path(__file__).resolve().parent.parent
DATA_DIR: Final[Path] = PROJECT_ROOT / "data"

# ---------- logging ----------
# WARNING keeps log lines from interleaving with the interactive prompt
LOG_LEVEL = os.getenv("ROADTRIP_LOG_LEVEL", "WARNING").upper()

logger = logging.getLogger("roadtrip")
logger.addHandler(logging.NullHandler())

from .roadtrip import RoadTrip  # noqa: E402
