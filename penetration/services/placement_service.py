"""High-level placement service — facade for the host layer."""

from __future__ import annotations
from typing import Sequence

from penetration.models import (
    Conduit, Level, Wall, PlacementParams, PlacementConfig, PlacementResult,
)
from penetration.core.driver import PlacementDriver
from penetration.core.raycaster import RayCaster, TrimeshRayCaster


class PlacementService:
    """Fills in defaults, delegates to the driver."""

    def __init__(self, caster: RayCaster | None = None) -> None:
        self.caster = caster or TrimeshRayCaster()
        self.driver = PlacementDriver(self.caster)

    def place(
        self,
        conduits: Sequence[Conduit],
        walls: Sequence[Wall] | None,
        levels: Sequence[Level] | None = None,
        params: PlacementParams | None = None,
        config: PlacementConfig | None = None,
    ) -> PlacementResult:
        if params is None:
            params = PlacementParams()
        if config is None:
            config = PlacementConfig()

        return self.driver.run(conduits, walls, params, config, levels)

    def host_parameters(
        self, result: PlacementResult, config: PlacementConfig | None = None,
    ) -> list[dict[str, float]]:
        """Opening dimensions keyed by the host's parameter names, one dict per opening."""
        if config is None:
            config = PlacementConfig()
        return [
            {config.width_parameter: o.width, config.height_parameter: o.height}
            for o in result.openings
        ]
