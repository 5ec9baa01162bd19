"""Ray casting against wall solids.

A `RayCaster` turns a wall collection into a `WallScene` once per run;
the scene answers directed ray queries with every entry, exit or touch
point, tagged with the struck wall and its proximity from the ray origin.
Any backend that implements these two interfaces can be injected into the
placement driver.
"""

from __future__ import annotations
import logging
import math
from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np
import trimesh

from penetration.core.errors import DegenerateGeometryError
from penetration.models import Point3D, Vector3D, RayHit, Wall

logger = logging.getLogger(__name__)


class WallScene(ABC):
    """Intersectable snapshot of a wall collection."""

    @abstractmethod
    def cast(self, origin: Point3D, direction: Vector3D) -> list[RayHit]:
        """
        Return every hit along the ray, with proximity >= 0.

        Hits behind the origin are not returned. An empty scene
        returns an empty list.
        """
        ...


class RayCaster(ABC):
    """Builds intersectable scenes from walls."""

    @abstractmethod
    def build_scene(
        self, walls: Sequence[Wall], tolerance: float | None = None,
    ) -> WallScene:
        """Snapshot `walls`; `tolerance` overrides the caster default for this scene."""
        ...

    def cast(
        self, origin: Point3D, direction: Vector3D, walls: Sequence[Wall],
    ) -> list[RayHit]:
        """One-shot query; prefer `build_scene` when casting many rays."""
        return self.build_scene(walls).cast(origin, direction)


def wall_to_mesh(wall: Wall) -> trimesh.Trimesh:
    """Closed box mesh for a wall: length x thickness x height."""
    dx = wall.end.x - wall.start.x
    dy = wall.end.y - wall.start.y
    angle = math.atan2(dy, dx)

    transform = trimesh.transformations.rotation_matrix(angle, [0.0, 0.0, 1.0])
    transform[:3, 3] = [
        (wall.start.x + wall.end.x) / 2.0,
        (wall.start.y + wall.end.y) / 2.0,
        wall.base_elevation + wall.height / 2.0,
    ]
    return trimesh.creation.box(
        extents=[wall.length, wall.thickness, wall.height],
        transform=transform,
    )


class TrimeshWallScene(WallScene):
    """All walls concatenated into one mesh, faces mapped back to wall ids."""

    def __init__(
        self,
        mesh: trimesh.Trimesh | None,
        face_wall_ids: np.ndarray,
        tolerance: float = 1e-9,
    ) -> None:
        self.mesh = mesh
        self.face_wall_ids = face_wall_ids
        self.tolerance = tolerance

    def cast(self, origin: Point3D, direction: Vector3D) -> list[RayHit]:
        unit = direction.normalized()
        if unit.is_zero(self.tolerance):
            raise DegenerateGeometryError("Cannot cast a ray with a zero-length direction")
        if self.mesh is None:
            return []

        o = np.asarray(origin.as_tuple(), dtype=float)
        d = np.asarray(unit.as_tuple(), dtype=float)
        locations, _index_ray, index_tri = self.mesh.ray.intersects_location(
            ray_origins=o.reshape(1, 3),
            ray_directions=d.reshape(1, 3),
            multiple_hits=True,
        )
        if len(locations) == 0:
            return []

        proximities = (np.asarray(locations, dtype=float) - o) @ d
        hits: list[RayHit] = []
        for proximity, tri in zip(proximities, index_tri):
            if proximity < -self.tolerance:
                continue
            hits.append(RayHit(
                proximity=max(0.0, float(proximity)),
                wall_id=str(self.face_wall_ids[int(tri)]),
            ))

        # Nearest first, so first-encountered deduplication keeps the entry face
        hits.sort(key=lambda h: (h.proximity, h.wall_id))
        return hits


class TrimeshRayCaster(RayCaster):
    """Ray caster backed by trimesh's ray/triangle intersector."""

    def __init__(self, tolerance: float = 1e-9) -> None:
        self.tolerance = tolerance

    def build_scene(
        self, walls: Sequence[Wall], tolerance: float | None = None,
    ) -> TrimeshWallScene:
        if tolerance is None:
            tolerance = self.tolerance
        meshes: list[trimesh.Trimesh] = []
        wall_ids: list[str] = []
        for wall in walls:
            if wall.is_degenerate(tolerance):
                logger.debug("Wall %s has no solid geometry, excluded from scene", wall.id)
                continue
            meshes.append(wall_to_mesh(wall))
            wall_ids.append(wall.id)

        if not meshes:
            return TrimeshWallScene(None, np.array([], dtype=object), tolerance)

        face_counts = [len(m.faces) for m in meshes]
        face_wall_ids = np.repeat(np.array(wall_ids, dtype=object), face_counts)
        mesh = trimesh.util.concatenate(meshes)
        logger.debug("Built wall scene: %d walls, %d faces", len(meshes), len(mesh.faces))
        return TrimeshWallScene(mesh, face_wall_ids, tolerance)
