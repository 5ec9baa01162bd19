"""Placement error taxonomy."""

from __future__ import annotations


class PlacementError(Exception):
    """Base class for all placement errors."""


class PreconditionError(PlacementError):
    """A run-wide precondition is not met. Aborts the whole run."""


class DegenerateGeometryError(PlacementError):
    """Geometry that cannot be ray cast (zero-length direction or conduit)."""
