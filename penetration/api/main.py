"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from penetration.api.routes import router
from penetration.core.errors import PlacementError, PreconditionError


async def precondition_failed(request: Request, exc: PreconditionError) -> JSONResponse:
    """Run-wide precondition failures abort the request as unprocessable input."""
    return JSONResponse(status_code=422, content={"detail": str(exc)})


async def placement_failed(request: Request, exc: PlacementError) -> JSONResponse:
    return JSONResponse(status_code=500, content={"detail": str(exc)})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Wall Penetration Placer",
        description="Places openings where ducts and pipes cross walls",
        version="0.1.0",
    )

    # Host plugins send no cookies
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.add_exception_handler(PreconditionError, precondition_failed)
    app.add_exception_handler(PlacementError, placement_failed)
    app.include_router(router, prefix="/api")

    return app


app = create_app()
