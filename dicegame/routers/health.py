"""Health check router for the verification API."""

from fastapi import APIRouter

from dicegame.config import settings
from dicegame.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint."""
    return HealthResponse(status="ok", env=settings.app_env, version=settings.app_version)
