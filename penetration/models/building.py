"""Building element models — levels and walls."""

from __future__ import annotations
import math
from pydantic import BaseModel, ConfigDict

from .geometry import Point3D


class Level(BaseModel):
    """A building level that hosts walls and openings."""
    id: str
    name: str = ""
    elevation: float = 0.0


class Wall(BaseModel):
    """
    A straight partition wall.

    Defined by its baseline at the base elevation, a thickness centred on
    the baseline, and a height measured up from the baseline.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    level_id: str
    start: Point3D
    end: Point3D
    thickness: float    # Native length units
    height: float       # Native length units

    @property
    def length(self) -> float:
        """Baseline length on plan."""
        return math.hypot(self.end.x - self.start.x, self.end.y - self.start.y)

    @property
    def base_elevation(self) -> float:
        return min(self.start.z, self.end.z)

    def is_degenerate(self, tolerance: float = 1e-9) -> bool:
        return (
            self.length < tolerance
            or self.thickness <= tolerance
            or self.height <= tolerance
        )
