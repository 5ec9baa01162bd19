"""Opening sizing from a conduit's cross-section."""

from __future__ import annotations

from penetration.models import Conduit, RectangularSection, CircularSection, DEFAULT_CLEARANCE


def size_opening(conduit: Conduit, clearance: float = DEFAULT_CLEARANCE) -> tuple[float, float]:
    """Return (width, height) of the opening: section dimensions plus clearance."""
    section = conduit.section
    if isinstance(section, RectangularSection):
        return section.width + clearance, section.height + clearance
    if isinstance(section, CircularSection):
        return section.diameter + clearance, section.diameter + clearance
    raise TypeError(f"Unsupported cross-section: {type(section).__name__}")
