"""Geometric primitives used throughout the placer."""

from __future__ import annotations
import math
from pydantic import BaseModel


class Point3D(BaseModel):
    """Point in 3D space (host model coordinates, native length units)."""
    x: float
    y: float
    z: float

    def distance_to(self, other: Point3D) -> float:
        return math.sqrt(
            (self.x - other.x) ** 2
            + (self.y - other.y) ** 2
            + (self.z - other.z) ** 2
        )

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __add__(self, other: Vector3D) -> Point3D:
        return Point3D(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z)

    def __sub__(self, other: Point3D) -> Vector3D:
        return Vector3D(x=self.x - other.x, y=self.y - other.y, z=self.z - other.z)


class Vector3D(BaseModel):
    """3D direction / displacement vector."""
    x: float
    y: float
    z: float

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def is_zero(self, tolerance: float = 1e-10) -> bool:
        return self.length() < tolerance

    def normalized(self) -> Vector3D:
        ln = self.length()
        if ln < 1e-10:
            return Vector3D(x=0.0, y=0.0, z=0.0)
        return Vector3D(x=self.x / ln, y=self.y / ln, z=self.z / ln)

    def dot(self, other: Vector3D) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __mul__(self, scalar: float) -> Vector3D:
        return Vector3D(x=self.x * scalar, y=self.y * scalar, z=self.z * scalar)


def direction_from_points(start: Point3D, end: Point3D) -> Vector3D:
    """Get direction vector from start to end."""
    return end - start


def point_along(origin: Point3D, direction: Vector3D, proximity: float) -> Point3D:
    """Point at `proximity` along a ray: origin + direction * proximity."""
    return origin + direction * proximity
