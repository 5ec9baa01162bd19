"""Geometric analysis — degenerate conduit and wall detection."""

from __future__ import annotations
import logging

from penetration.models import PlacementContext

logger = logging.getLogger(__name__)


class GeometryAnalyzer:
    """Finds inputs that cannot take part in ray casting."""

    def analyze(self, context: PlacementContext) -> None:
        """Run all analysis passes and populate the context."""
        tolerance = context.config.tolerance
        context.skipped_conduit_ids = self._degenerate_conduits(context, tolerance)
        context.skipped_wall_ids = self._degenerate_walls(context, tolerance)

    def _degenerate_conduits(self, context: PlacementContext, tolerance: float) -> list[str]:
        """Conduits with zero length or zero direction are skipped, not fatal."""
        skipped: list[str] = []
        for conduit in context.conduits:
            if conduit.is_degenerate(tolerance):
                logger.warning(
                    "Skipping conduit %s: degenerate geometry (length=%s, direction=%s)",
                    conduit.id, conduit.length, conduit.direction.as_tuple(),
                )
                skipped.append(conduit.id)
        return skipped

    def _degenerate_walls(self, context: PlacementContext, tolerance: float) -> list[str]:
        skipped: list[str] = []
        for wall in context.walls:
            if wall.is_degenerate(tolerance):
                logger.warning(
                    "Ignoring wall %s: degenerate geometry (length=%s, thickness=%s, height=%s)",
                    wall.id, wall.length, wall.thickness, wall.height,
                )
                skipped.append(wall.id)
        return skipped
