"""
Fixtures for API tests: an ASGI client with the services overridden.
"""

from __future__ import annotations

from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from awashtube.api.deps import get_library_service, get_youtube_service
from awashtube.api.main import app
from awashtube.services.library_service import LibraryService
from awashtube.services.response_cache import ResponseCache
from awashtube.services.youtube_service import YouTubeService

TEST_CHANNEL_ID = "UCGSroElDPOtCb8Wwhkae7qw"


@pytest.fixture
def mock_youtube_service() -> MagicMock:
    """YouTube service whose fetch methods are AsyncMocks."""
    service = MagicMock(spec=YouTubeService)
    service.api_key = "test_api_key"
    service.channel_id = TEST_CHANNEL_ID
    service.cache = ResponseCache()
    service.fetch_channel_videos = AsyncMock()
    service.fetch_video_details = AsyncMock()
    return service


@pytest.fixture
def api_library() -> LibraryService:
    """In-memory library for API requests."""
    return LibraryService()


@pytest.fixture
async def async_client(
    mock_youtube_service: MagicMock, api_library: LibraryService
) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to the app with service overrides."""
    app.dependency_overrides[get_youtube_service] = lambda: mock_youtube_service
    app.dependency_overrides[get_library_service] = lambda: api_library
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
