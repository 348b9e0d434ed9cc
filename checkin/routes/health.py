"""Liveness endpoint."""

from fastapi import APIRouter

from checkin.schemas.tools import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Always ok; touches no other component."""
    return HealthResponse()
