"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from svg_validator import __version__
from svg_validator.engine import get_registry
from svg_validator.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        checks_registered=get_registry().count,
    )
