"""
Enums for awashtube models.

Defines enumeration types used across the application for consistent
type safety and validation.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class LibraryList(str, Enum):
    """Locally persisted lists of video IDs."""

    FAVORITES = "favorites"
    HISTORY = "history"
    PLAYLIST = "playlist"
    WATCH_LATER = "watchLater"

    @property
    def label(self) -> str:
        """Display label for the list."""
        return _LIST_LABELS[self]


_LIST_LABELS: dict[LibraryList, str] = {
    LibraryList.FAVORITES: "Favorites",
    LibraryList.HISTORY: "History",
    LibraryList.PLAYLIST: "Playlist",
    LibraryList.WATCH_LATER: "Watch Later",
}


class ToggleableList(str, Enum):
    """Lists a user adds to or removes from directly; history only grows on play."""

    FAVORITES = "favorites"
    PLAYLIST = "playlist"
    WATCH_LATER = "watchLater"

    @property
    def library_list(self) -> LibraryList:
        return LibraryList(self.value)


class LibraryTab(str, Enum):
    """Navigation tabs: every video, or one of the library lists."""

    ALL = "all"
    FAVORITES = "favorites"
    HISTORY = "history"
    PLAYLIST = "playlist"
    WATCH_LATER = "watchLater"

    @property
    def label(self) -> str:
        """Display label for the tab."""
        if self is LibraryTab.ALL:
            return "All Videos"
        return LibraryList(self.value).label

    @property
    def library_list(self) -> Optional[LibraryList]:
        """The list this tab filters on, or None for the ``all`` tab."""
        if self is LibraryTab.ALL:
            return None
        return LibraryList(self.value)


class PlayerAction(str, Enum):
    """Actions triggered by player keyboard shortcuts."""

    CLOSE = "close"
    FOCUS_SEARCH = "focus_search"
    TOGGLE_PLAY = "toggle_play"
    SEEK_FORWARD = "seek_forward"
    SEEK_BACKWARD = "seek_backward"
    VOLUME_UP = "volume_up"
    VOLUME_DOWN = "volume_down"
    TOGGLE_MUTE = "toggle_mute"
    TOGGLE_FULLSCREEN = "toggle_fullscreen"
