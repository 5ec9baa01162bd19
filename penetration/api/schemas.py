"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from penetration.models import (
    Conduit, Level, Wall, OpeningSpec, PlacementParams, PlacementConfig, PlacementStats,
)


class PlaceRequest(BaseModel):
    """Request body for the /openings endpoint."""
    conduits: list[Conduit]
    walls: list[Wall] | None = None
    levels: list[Level] = []
    params: PlacementParams = PlacementParams()
    config: PlacementConfig = PlacementConfig()


class OpeningOut(OpeningSpec):
    """Opening as returned to the host, with dimensions keyed by parameter name."""
    parameters: dict[str, float] = {}


class PlaceResponse(BaseModel):
    """Response from the /openings endpoint."""
    openings: list[OpeningOut]
    stats: PlacementStats
    conduit_count: int
    wall_count: int
