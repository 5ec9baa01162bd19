"""Placement context — inputs and lookups for a single placement run."""

from __future__ import annotations
from pydantic import BaseModel, Field, PrivateAttr

from .building import Level, Wall
from .conduits import Conduit
from .placement import OpeningSpec
from .parameters import PlacementParams, PlacementConfig


class PlacementContext(BaseModel):
    """
    Holds all state during a single placement pass.

    Conduits, walls and levels are read-only snapshots supplied by the host.
    The analyzer records degenerate conduits and walls.
    The driver collects the emitted openings.
    """
    # Input
    conduits: list[Conduit]
    walls: list[Wall]
    levels: list[Level] = []
    params: PlacementParams = Field(default_factory=PlacementParams)
    config: PlacementConfig = Field(default_factory=PlacementConfig)

    # Analysis results (populated by the analyzer)
    skipped_conduit_ids: list[str] = []
    skipped_wall_ids: list[str] = []

    # Output (populated by the driver)
    openings: list[OpeningSpec] = []

    _walls_by_id: dict[str, Wall] = PrivateAttr(default_factory=dict)
    _levels_by_id: dict[str, Level] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context: object) -> None:
        self._walls_by_id = {w.id: w for w in self.walls}
        self._levels_by_id = {lv.id: lv for lv in self.levels}

    def add_openings(self, openings: list[OpeningSpec]) -> None:
        self.openings.extend(openings)

    def get_wall(self, wall_id: str) -> Wall | None:
        return self._walls_by_id.get(wall_id)

    def get_level(self, level_id: str) -> Level | None:
        return self._levels_by_id.get(level_id)

    def resolve_level(self, wall: Wall) -> Level:
        """Level hosting `wall`; a bare level at the wall base when the host gave none."""
        level = self.get_level(wall.level_id)
        if level is None:
            level = Level(id=wall.level_id, elevation=wall.base_elevation)
        return level

    def active_conduits(self) -> list[Conduit]:
        skipped = set(self.skipped_conduit_ids)
        return [c for c in self.conduits if c.id not in skipped]

    def active_walls(self) -> list[Wall]:
        skipped = set(self.skipped_wall_ids)
        return [w for w in self.walls if w.id not in skipped]
