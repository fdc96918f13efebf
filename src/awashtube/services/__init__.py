"""
Services module for awashtube.

Contains the YouTube API service, the response cache, the library and its
persistence, the player controls and the browser session that ties them
together.
"""

from __future__ import annotations

from awashtube.services.browser import BrowserSession
from awashtube.services.library_service import LibraryService
from awashtube.services.library_store import DebouncedSaver, LibraryStore
from awashtube.services.player import PlayerController, PlayerState
from awashtube.services.response_cache import ResponseCache
from awashtube.services.youtube_service import YouTubeService

__all__: list[str] = [
    "BrowserSession",
    "DebouncedSaver",
    "LibraryService",
    "LibraryStore",
    "PlayerController",
    "PlayerState",
    "ResponseCache",
    "YouTubeService",
]
