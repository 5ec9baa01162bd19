"""Ray hits, crossings and opening placement output models."""

from __future__ import annotations
from pydantic import BaseModel

from .building import Level
from .conduits import ConduitKind
from .geometry import Point3D


class RayHit(BaseModel):
    """A raw ray/wall intersection. Proximity is measured from the ray origin."""
    proximity: float
    wall_id: str


class Crossing(BaseModel):
    """A filtered, deduplicated hit: one physical penetration of one wall."""
    proximity: float
    wall_id: str
    level: Level
    point: Point3D


class OpeningSpec(BaseModel):
    """Instruction for the host to place one opening."""
    conduit_id: str
    conduit_kind: ConduitKind
    point: Point3D
    wall_id: str
    level: Level
    width: float
    height: float


class PlacementStats(BaseModel):
    """Summary statistics for a placement run."""
    total_openings: int = 0
    duct_openings: int = 0
    pipe_openings: int = 0
    conduits_processed: int = 0
    conduits_skipped: int = 0
    conduits_without_crossings: int = 0

    @classmethod
    def from_openings(
        cls,
        openings: list[OpeningSpec],
        conduits_processed: int = 0,
        conduits_skipped: int = 0,
    ) -> PlacementStats:
        ducts = sum(1 for o in openings if o.conduit_kind == ConduitKind.DUCT)
        pipes = sum(1 for o in openings if o.conduit_kind == ConduitKind.PIPE)
        crossed = len({o.conduit_id for o in openings})
        return cls(
            total_openings=len(openings),
            duct_openings=ducts,
            pipe_openings=pipes,
            conduits_processed=conduits_processed,
            conduits_skipped=conduits_skipped,
            conduits_without_crossings=max(0, conduits_processed - crossed),
        )


class PlacementResult(BaseModel):
    """All openings produced by one run, in conduit order."""
    openings: list[OpeningSpec]
    stats: PlacementStats = None  # type: ignore[assignment]

    def model_post_init(self, __context: object) -> None:
        if self.stats is None:
            self.stats = PlacementStats.from_openings(self.openings)

    def for_conduit(self, conduit_id: str) -> list[OpeningSpec]:
        return [o for o in self.openings if o.conduit_id == conduit_id]
