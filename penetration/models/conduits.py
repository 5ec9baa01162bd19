"""Linear conduit models — duct and pipe runs."""

from __future__ import annotations
from enum import Enum
from typing import Annotated, Literal, Union
from pydantic import BaseModel, ConfigDict, Field

from .geometry import Point3D, Vector3D, direction_from_points


class ConduitKind(str, Enum):
    DUCT = "duct"
    PIPE = "pipe"


class RectangularSection(BaseModel):
    """Rectangular duct cross-section."""
    shape: Literal["rectangular"] = "rectangular"
    width: float
    height: float


class CircularSection(BaseModel):
    """Round pipe (or round duct) cross-section."""
    shape: Literal["circular"] = "circular"
    diameter: float


CrossSection = Annotated[
    Union[RectangularSection, CircularSection],
    Field(discriminator="shape"),
]


class Conduit(BaseModel):
    """
    A straight duct or pipe run.

    `start` is the first curve endpoint, `direction` points towards the
    second one and `length` is the curve length. The direction is expected
    to be a unit vector; the ray caster normalises it regardless.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    kind: ConduitKind
    start: Point3D
    direction: Vector3D
    length: float
    section: CrossSection

    @property
    def end(self) -> Point3D:
        return self.start + self.direction.normalized() * self.length

    def is_degenerate(self, tolerance: float = 1e-9) -> bool:
        return self.length <= tolerance or self.direction.is_zero(tolerance)

    @classmethod
    def from_endpoints(
        cls,
        id: str,
        start: Point3D,
        end: Point3D,
        section: RectangularSection | CircularSection,
        kind: ConduitKind | None = None,
    ) -> Conduit:
        """Build a conduit from its two curve endpoints."""
        if kind is None:
            kind = ConduitKind.PIPE if isinstance(section, CircularSection) else ConduitKind.DUCT
        delta = direction_from_points(start, end)
        return cls(
            id=id,
            kind=kind,
            start=start,
            direction=delta.normalized(),
            length=delta.length(),
            section=section,
        )
