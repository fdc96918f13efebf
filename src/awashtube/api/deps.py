"""FastAPI dependencies for API endpoints."""

from fastapi import Depends

from awashtube.container import container
from awashtube.services.browser import BrowserSession
from awashtube.services.library_service import LibraryService
from awashtube.services.player import PlayerController
from awashtube.services.youtube_service import YouTubeService


def get_youtube_service() -> YouTubeService:
    """Shared YouTube service with its page cache."""
    return container.youtube_service


def get_library_service() -> LibraryService:
    """Shared library, persisted through the debounced saver."""
    return container.library_service


def get_player_controller() -> PlayerController:
    return container.create_player_controller()


def get_browser_session(
    youtube_service: YouTubeService = Depends(get_youtube_service),
    library: LibraryService = Depends(get_library_service),
    player: PlayerController = Depends(get_player_controller),
) -> BrowserSession:
    """
    Browser session for a single request.

    Returns
    -------
    BrowserSession
        A session over the shared services with a fresh player.
    """
    return BrowserSession(
        youtube_service=youtube_service,
        library=library,
        player=player,
        page_size=container.settings.page_size,
    )
