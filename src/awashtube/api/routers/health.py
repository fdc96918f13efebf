"""Health check endpoint."""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from awashtube import __version__
from awashtube.api.deps import get_youtube_service
from awashtube.api.schemas.responses import ApiResponse
from awashtube.services.youtube_service import YouTubeService


class HealthStatus(BaseModel):
    """Application health status."""

    status: str  # "healthy" or "degraded"
    version: str
    channel_id: str
    api_key_configured: bool
    cached_pages: int
    timestamp: datetime


class HealthResponse(ApiResponse[HealthStatus]):
    """Response for health check endpoint."""

    pass


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(
    youtube_service: YouTubeService = Depends(get_youtube_service),
) -> HealthResponse:
    """
    Report whether the server can reach the channel.

    The status is ``degraded`` while no YouTube API key is configured.
    """
    api_key_configured = bool(youtube_service.api_key)
    return HealthResponse(
        data=HealthStatus(
            status="healthy" if api_key_configured else "degraded",
            version=__version__,
            channel_id=youtube_service.channel_id,
            api_key_configured=api_key_configured,
            cached_pages=len(youtube_service.cache),
            timestamp=datetime.now(timezone.utc),
        )
    )
