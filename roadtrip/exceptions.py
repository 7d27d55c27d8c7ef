"""Exceptions raised by the roadtrip package."""
from __future__ import annotations


class RoadTripError(RuntimeError):
    """Base class for every error the package raises on purpose."""


class IngestionError(RoadTripError, ValueError):
    """A dataset file is missing, unreadable or holds no usable rows."""


class BorderInvariantError(RoadTripError):
    """
    An edge the border graph guarantees by construction is absent.

    Only raised while rebuilding a route from a finished search, so it
    always points at a programming defect rather than bad user input.
    """


__all__ = ["RoadTripError", "IngestionError", "BorderInvariantError"]
