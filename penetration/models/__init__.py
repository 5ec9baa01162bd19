from .geometry import Point3D, Vector3D, direction_from_points, point_along
from .building import Level, Wall
from .conduits import (
    Conduit, ConduitKind, CrossSection, RectangularSection, CircularSection,
)
from .placement import RayHit, Crossing, OpeningSpec, PlacementStats, PlacementResult
from .parameters import PlacementParams, PlacementConfig, DEFAULT_CLEARANCE
from .context import PlacementContext

__all__ = [
    "Point3D", "Vector3D", "direction_from_points", "point_along",
    "Level", "Wall",
    "Conduit", "ConduitKind", "CrossSection", "RectangularSection", "CircularSection",
    "RayHit", "Crossing", "OpeningSpec", "PlacementStats", "PlacementResult",
    "PlacementParams", "PlacementConfig", "DEFAULT_CLEARANCE",
    "PlacementContext",
]
