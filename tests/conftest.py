"""
Pytest configuration and fixtures for awashtube tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from awashtube.config.settings import Settings
from awashtube.container import Container
from awashtube.services.library_service import LibraryService
from awashtube.services.player import PlayerController
from awashtube.services.response_cache import ResponseCache
from awashtube.services.youtube_service import YouTubeService

TEST_CHANNEL_ID = "UCGSroElDPOtCb8Wwhkae7qw"


@pytest.fixture
def mock_settings(tmp_path: Path) -> Settings:
    """Settings pointing the library file at a temporary directory."""
    return Settings(
        _env_file=None,
        youtube_api_key="test_api_key",
        youtube_channel_id=TEST_CHANNEL_ID,
        data_dir=tmp_path,
        persist_debounce_seconds=0.01,
    )


@pytest.fixture
def test_container(mock_settings: Settings) -> Container:
    """Container wired to the test settings."""
    return Container(settings=mock_settings)


@pytest.fixture
def youtube_service() -> YouTubeService:
    """YouTube service with a fresh cache."""
    return YouTubeService(
        api_key="test_api_key",
        channel_id=TEST_CHANNEL_ID,
        cache=ResponseCache(ttl_seconds=300),
    )


@pytest.fixture
def library() -> LibraryService:
    """Empty in-memory library."""
    return LibraryService()


@pytest.fixture
def player() -> PlayerController:
    """Player with the default YouTube URLs."""
    return PlayerController()
