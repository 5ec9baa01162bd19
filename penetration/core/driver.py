"""Placement driver — runs the per-conduit cast/filter/dedupe/size pipeline."""

from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from penetration.models import (
    Conduit, Crossing, Level, OpeningSpec, PlacementConfig, PlacementContext,
    PlacementParams, PlacementResult, PlacementStats, Wall, point_along,
)
from penetration.core.analyzer import GeometryAnalyzer
from penetration.core.errors import (
    DegenerateGeometryError, PlacementError, PreconditionError,
)
from penetration.core.hits import dedupe_hits, filter_hits
from penetration.core.raycaster import RayCaster, WallScene
from penetration.core.sizing import size_opening

logger = logging.getLogger(__name__)


class PlacementDriver:
    """
    Stateless placement driver.

    Takes conduits + walls, checks run preconditions, builds the wall scene
    once, then processes every conduit independently and returns all
    openings in conduit order.
    """

    def __init__(self, caster: RayCaster | None) -> None:
        self.caster = caster
        self.analyzer = GeometryAnalyzer()

    def run(
        self,
        conduits: Sequence[Conduit],
        walls: Sequence[Wall] | None,
        params: PlacementParams | None = None,
        config: PlacementConfig | None = None,
        levels: Sequence[Level] | None = None,
    ) -> PlacementResult:
        # Preconditions are checked once, before any conduit is processed
        if walls is None:
            raise PreconditionError("No intersectable wall collection available")
        if self.caster is None:
            raise PreconditionError("No ray casting context available")

        if params is None:
            params = PlacementParams()
        if config is None:
            config = PlacementConfig()

        context = PlacementContext(
            conduits=list(conduits),
            walls=list(walls),
            levels=list(levels or []),
            params=params,
            config=config,
        )

        # Analysis phase — drop degenerate conduits and walls
        self.analyzer.analyze(context)

        scene = self.caster.build_scene(context.active_walls(), tolerance=config.tolerance)
        active = context.active_conduits()
        logger.info(
            "Placing openings: %d conduits (%d skipped), %d walls, clearance=%s",
            len(active), len(context.skipped_conduit_ids),
            len(context.walls), params.clearance,
        )

        if config.max_workers > 1 and len(active) > 1:
            with ThreadPoolExecutor(max_workers=config.max_workers) as pool:
                per_conduit = list(pool.map(
                    lambda c: self._place_conduit(c, scene, context), active,
                ))
        else:
            per_conduit = [self._place_conduit(c, scene, context) for c in active]

        skipped = len(context.skipped_conduit_ids)
        for openings in per_conduit:
            if openings is None:
                skipped += 1
                continue
            context.add_openings(openings)

        processed = len(context.conduits) - skipped
        stats = PlacementStats.from_openings(
            context.openings,
            conduits_processed=processed,
            conduits_skipped=skipped,
        )
        logger.info(
            "Placed %d openings for %d conduits (%d without crossings)",
            stats.total_openings, processed, stats.conduits_without_crossings,
        )
        return PlacementResult(openings=context.openings, stats=stats)

    def _place_conduit(
        self,
        conduit: Conduit,
        scene: WallScene,
        context: PlacementContext,
    ) -> list[OpeningSpec] | None:
        """Openings for one conduit, or None when its geometry cannot be cast."""
        origin = conduit.start
        direction = conduit.direction.normalized()

        try:
            raw = scene.cast(origin, direction)
        except DegenerateGeometryError as exc:
            logger.warning("Skipping conduit %s: %s", conduit.id, exc)
            return None

        hits = dedupe_hits(filter_hits(raw, conduit.length))
        logger.debug(
            "Conduit %s: %d raw hits, %d crossings", conduit.id, len(raw), len(hits),
        )
        if not hits:
            return []

        width, height = size_opening(conduit, context.params.clearance)
        openings: list[OpeningSpec] = []
        for hit in hits:
            wall = context.get_wall(hit.wall_id)
            if wall is None:
                raise PlacementError(
                    f"Ray caster reported a hit on unknown wall {hit.wall_id!r}"
                )
            crossing = Crossing(
                proximity=hit.proximity,
                wall_id=wall.id,
                level=context.resolve_level(wall),
                point=point_along(origin, direction, hit.proximity),
            )
            openings.append(OpeningSpec(
                conduit_id=conduit.id,
                conduit_kind=conduit.kind,
                point=crossing.point,
                wall_id=crossing.wall_id,
                level=crossing.level,
                width=width,
                height=height,
            ))
        return openings
