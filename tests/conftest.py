"""
Shared test fixtures for placement tests.
"""
from typing import Sequence

import pytest

from penetration.core.raycaster import RayCaster, WallScene
from penetration.models import (
    CircularSection, Conduit, ConduitKind, Level, Point3D, RayHit,
    RectangularSection, Vector3D, Wall,
)


def make_wall(
    wall_id: str = "W1",
    x: float = 4.1,
    thickness: float = 0.2,
    level_id: str = "L1",
    y_range: tuple = (-3.0, 5.0),
    base: float = -1.0,
    height: float = 4.0,
) -> Wall:
    """A wall running along Y whose solid spans x in [x - t/2, x + t/2]."""
    return Wall(
        id=wall_id,
        level_id=level_id,
        start=Point3D(x=x, y=y_range[0], z=base),
        end=Point3D(x=x, y=y_range[1], z=base),
        thickness=thickness,
        height=height,
    )


def make_duct(
    conduit_id: str = "D1",
    start: tuple = (0.0, 0.0, 0.0),
    direction: tuple = (1.0, 0.0, 0.0),
    length: float = 10.0,
    width: float = 0.5,
    height: float = 0.3,
) -> Conduit:
    return Conduit(
        id=conduit_id,
        kind=ConduitKind.DUCT,
        start=Point3D(x=start[0], y=start[1], z=start[2]),
        direction=Vector3D(x=direction[0], y=direction[1], z=direction[2]),
        length=length,
        section=RectangularSection(width=width, height=height),
    )


def make_pipe(
    conduit_id: str = "P1",
    start: tuple = (0.0, 0.0, 0.0),
    direction: tuple = (1.0, 0.0, 0.0),
    length: float = 10.0,
    diameter: float = 0.2,
) -> Conduit:
    return Conduit(
        id=conduit_id,
        kind=ConduitKind.PIPE,
        start=Point3D(x=start[0], y=start[1], z=start[2]),
        direction=Vector3D(x=direction[0], y=direction[1], z=direction[2]),
        length=length,
        section=CircularSection(diameter=diameter),
    )


class FakeScene(WallScene):
    """Returns canned hits for every ray, regardless of geometry."""

    def __init__(self, hits: list[RayHit]) -> None:
        self.hits = hits
        self.calls: list[tuple[Point3D, Vector3D]] = []

    def cast(self, origin: Point3D, direction: Vector3D) -> list[RayHit]:
        self.calls.append((origin, direction))
        return list(self.hits)


class FakeRayCaster(RayCaster):
    """Ray caster that replays a fixed list of hits."""

    def __init__(self, hits: list[RayHit]) -> None:
        self.scene = FakeScene(hits)
        self.built_with: list[Wall] = []
        self.tolerance: float | None = None

    def build_scene(
        self, walls: Sequence[Wall], tolerance: float | None = None,
    ) -> FakeScene:
        self.built_with = list(walls)
        self.tolerance = tolerance
        return self.scene


@pytest.fixture
def wall():
    """Wall W1 whose solid spans x in [4.0, 4.2]."""
    return make_wall()


@pytest.fixture
def level():
    return Level(id="L1", name="Level 1", elevation=0.0)


@pytest.fixture
def duct():
    """0.5 x 0.3 duct from the origin along +X, length 10."""
    return make_duct()


@pytest.fixture
def pipe():
    """0.2 diameter pipe from the origin along +X, length 10."""
    return make_pipe()
