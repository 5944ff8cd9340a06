"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from streaklab import __version__
from streaklab.engine.compositor import noise_stack
from streaklab.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        noise_layers=len(noise_stack()),
    )
