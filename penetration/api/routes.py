"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter

from penetration.services.placement_service import PlacementService
from penetration.api.schemas import OpeningOut, PlaceRequest, PlaceResponse

router = APIRouter()

# Shared service instance
_service = PlacementService()


@router.post("/openings", response_model=PlaceResponse)
def place_openings(request: PlaceRequest) -> PlaceResponse:
    """Compute opening placements for conduits crossing walls."""
    result = _service.place(
        request.conduits, request.walls, request.levels,
        request.params, request.config,
    )

    parameters = _service.host_parameters(result, request.config)
    openings = [
        OpeningOut(**o.model_dump(), parameters=p)
        for o, p in zip(result.openings, parameters)
    ]

    return PlaceResponse(
        openings=openings,
        stats=result.stats,
        conduit_count=len(request.conduits),
        wall_count=len(request.walls or []),
    )


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
