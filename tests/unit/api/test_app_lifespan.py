"""
Tests for the API application's startup and shutdown.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator
from unittest.mock import patch

import pytest
from httpx import ASGITransport, AsyncClient

from awashtube.api.main import app, lifespan
from awashtube.config.settings import Settings
from awashtube.container import Container

pytestmark = pytest.mark.asyncio


@pytest.fixture
def slow_container(tmp_path: Path) -> Iterator[Container]:
    """Container whose saver would not fire on its own during a test."""
    settings = Settings(
        _env_file=None,
        youtube_api_key="test_api_key",
        youtube_channel_id="UCGSroElDPOtCb8Wwhkae7qw",
        data_dir=tmp_path / "data",
        persist_debounce_seconds=60,
    )
    test_container = Container(settings=settings)
    with (
        patch("awashtube.api.main.container", test_container),
        patch("awashtube.api.deps.container", test_container),
    ):
        yield test_container


class TestLifespan:
    """Test the application lifespan."""

    async def test_startup_creates_data_directory(self, slow_container: Container) -> None:
        async with lifespan(app):
            assert slow_container.settings.data_dir.is_dir()

    async def test_shutdown_flushes_pending_library_write(
        self, slow_container: Container
    ) -> None:
        """Test a debounced change reaches disk when the app stops."""
        async with lifespan(app):
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                response = await client.post("/api/v1/library/favorites/aaaaaaaaaaa")

            assert response.status_code == 200
            assert slow_container.debounced_saver.pending is True
            assert not slow_container.settings.library_path.exists()

        assert slow_container.debounced_saver.pending is False
        assert slow_container.library_store.load().favorites == ["aaaaaaaaaaa"]
