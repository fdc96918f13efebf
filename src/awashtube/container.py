"""
Dependency Injection Container for awashtube.

This module provides a centralized container for the services shared across
the CLI and the local API:

- Singleton services via cached properties (lazy initialization)
- Transient factories for per-session objects
- ``reset()`` to clear singletons between tests

Usage
-----
    >>> from awashtube.container import container
    >>> service = container.youtube_service  # Cached
    >>> session = container.create_browser_session()  # New each call
"""

from __future__ import annotations

from functools import cached_property
from typing import Optional

from awashtube.config.settings import Settings, get_settings
from awashtube.services.browser import BrowserSession
from awashtube.services.library_service import LibraryService
from awashtube.services.library_store import DebouncedSaver, LibraryStore
from awashtube.services.player import PlayerController
from awashtube.services.response_cache import ResponseCache
from awashtube.services.youtube_service import YouTubeService


class Container:
    """
    Dependency injection container for awashtube.

    Parameters
    ----------
    settings : Settings | None
        Settings used to build services; the global settings when omitted.

    Examples
    --------
    Singletons are shared, factories are not:

        >>> container = Container()
        >>> container.library_service is container.library_service
        True
        >>> container.create_player_controller() is container.create_player_controller()
        False
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    # -------------------------------------------------------------------------
    # Singleton Service Properties (Cached - same instance on repeated access)
    # -------------------------------------------------------------------------

    @cached_property
    def response_cache(self) -> ResponseCache:
        """Page cache shared by every YouTube request."""
        return ResponseCache(ttl_seconds=self.settings.cache_ttl_seconds)

    @cached_property
    def youtube_service(self) -> YouTubeService:
        """
        Get the singleton YouTubeService instance.

        Returns
        -------
        YouTubeService
            Service configured with the API key, channel and shared cache.
        """
        return YouTubeService(
            api_key=self.settings.youtube_api_key,
            channel_id=self.settings.youtube_channel_id,
            base_url=self.settings.youtube_api_base_url,
            timeout=float(self.settings.request_timeout),
            cache=self.response_cache,
            qualities=self.settings.default_qualities,
        )

    @cached_property
    def library_store(self) -> LibraryStore:
        return LibraryStore(self.settings.library_path)

    @cached_property
    def debounced_saver(self) -> DebouncedSaver:
        return DebouncedSaver(
            self.library_store, delay=self.settings.persist_debounce_seconds
        )

    @cached_property
    def library_service(self) -> LibraryService:
        """
        Get the singleton LibraryService instance.

        The library is loaded from the store on first access and every
        change is handed to the debounced saver.

        Returns
        -------
        LibraryService
            The shared library.
        """
        return LibraryService(
            snapshot=self.library_store.load(),
            on_change=self.debounced_saver.schedule,
        )

    # -------------------------------------------------------------------------
    # Factory Methods (Transient - new instance per call)
    # -------------------------------------------------------------------------

    def create_player_controller(self) -> PlayerController:
        return PlayerController(
            embed_base_url=self.settings.embed_base_url,
            watch_base_url=self.settings.watch_base_url,
        )

    def create_browser_session(self) -> BrowserSession:
        """
        Create a new BrowserSession wired to the shared services.

        Returns
        -------
        BrowserSession
            A session with its own player and no loaded videos.
        """
        return BrowserSession(
            youtube_service=self.youtube_service,
            library=self.library_service,
            player=self.create_player_controller(),
            page_size=self.settings.page_size,
        )

    # -------------------------------------------------------------------------
    # Testing Support
    # -------------------------------------------------------------------------

    def reset(self) -> None:
        """
        Reset the container by clearing all cached singleton instances.

        Examples
        --------
        >>> container.reset()
        """
        properties_to_clear = [
            "response_cache",
            "youtube_service",
            "library_store",
            "debounced_saver",
            "library_service",
        ]
        for prop in properties_to_clear:
            self.__dict__.pop(prop, None)


# Global container instance
container = Container()
