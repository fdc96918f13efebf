"""
Library state for the channel browser.

Holds the favorites, history, playlist and watch-later lists plus the active
navigation tab, and filters loaded videos against them. Every mutation hands
a fresh snapshot to the ``on_change`` callback so callers can persist it.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional

from awashtube.models.enums import LibraryList, LibraryTab
from awashtube.models.library import LibrarySnapshot, LibraryStats
from awashtube.models.video import Video

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[LibrarySnapshot], None]


class LibraryService:
    """
    In-memory library with change notification.

    Parameters
    ----------
    snapshot : LibrarySnapshot | None
        Initial state, typically loaded from a ``LibraryStore``.
    on_change : Callable[[LibrarySnapshot], None] | None
        Called with the new state after every mutation.

    Examples
    --------
    >>> library = LibraryService()
    >>> library.toggle_favorite("dQw4w9WgXcQ")
    True
    >>> library.toggle_favorite("dQw4w9WgXcQ")
    False
    """

    def __init__(
        self,
        snapshot: Optional[LibrarySnapshot] = None,
        on_change: Optional[ChangeCallback] = None,
    ) -> None:
        initial = snapshot or LibrarySnapshot()
        self._lists: Dict[LibraryList, List[str]] = {
            library_list: initial.get_list(library_list) for library_list in LibraryList
        }
        self._active_tab = initial.active_tab
        self._on_change = on_change

    # -------------------------------------------------------------------------
    # State access
    # -------------------------------------------------------------------------

    @property
    def snapshot(self) -> LibrarySnapshot:
        """Copy of the current state."""
        return LibrarySnapshot(
            favorites=list(self._lists[LibraryList.FAVORITES]),
            history=list(self._lists[LibraryList.HISTORY]),
            playlist=list(self._lists[LibraryList.PLAYLIST]),
            watch_later=list(self._lists[LibraryList.WATCH_LATER]),
            active_tab=self._active_tab,
        )

    @property
    def active_tab(self) -> LibraryTab:
        return self._active_tab

    @property
    def favorites(self) -> List[str]:
        return self.get_list(LibraryList.FAVORITES)

    @property
    def history(self) -> List[str]:
        return self.get_list(LibraryList.HISTORY)

    @property
    def playlist(self) -> List[str]:
        return self.get_list(LibraryList.PLAYLIST)

    @property
    def watch_later(self) -> List[str]:
        return self.get_list(LibraryList.WATCH_LATER)

    def get_list(self, library_list: LibraryList) -> List[str]:
        """Return a copy of the IDs in ``library_list``."""
        return list(self._lists[library_list])

    def contains(self, library_list: LibraryList, video_id: str) -> bool:
        """Check whether ``video_id`` is in ``library_list``."""
        return video_id in self._lists[library_list]

    def stats(self) -> LibraryStats:
        """Count the entries in each list."""
        return LibraryStats(
            favorites=len(self._lists[LibraryList.FAVORITES]),
            history=len(self._lists[LibraryList.HISTORY]),
            playlist=len(self._lists[LibraryList.PLAYLIST]),
            watch_later=len(self._lists[LibraryList.WATCH_LATER]),
        )

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def toggle(self, library_list: LibraryList, video_id: str) -> bool:
        """
        Add ``video_id`` to ``library_list`` or remove it if already present.

        Parameters
        ----------
        library_list : LibraryList
            The list to update.
        video_id : str
            The video to add or remove.

        Returns
        -------
        bool
            True if the video is in the list afterwards.
        """
        ids = self._lists[library_list]
        if video_id in ids:
            self._lists[library_list] = [i for i in ids if i != video_id]
            present = False
        else:
            self._lists[library_list] = [*ids, video_id]
            present = True

        logger.debug(
            "%s %s %s", "Added" if present else "Removed", video_id, library_list.value
        )
        self._notify()
        return present

    def toggle_favorite(self, video_id: str) -> bool:
        return self.toggle(LibraryList.FAVORITES, video_id)

    def toggle_playlist(self, video_id: str) -> bool:
        return self.toggle(LibraryList.PLAYLIST, video_id)

    def toggle_watch_later(self, video_id: str) -> bool:
        return self.toggle(LibraryList.WATCH_LATER, video_id)

    def record_history(self, video_id: str) -> bool:
        """
        Append ``video_id`` to the history unless it is already there.

        Returns
        -------
        bool
            True if the history changed.
        """
        history = self._lists[LibraryList.HISTORY]
        if video_id in history:
            return False
        self._lists[LibraryList.HISTORY] = [*history, video_id]
        self._notify()
        return True

    def set_active_tab(self, tab: LibraryTab) -> None:
        """Select the navigation tab used by default when filtering."""
        self._active_tab = LibraryTab(tab)
        self._notify()

    def clear_all(self) -> None:
        """Empty every list and return to the ``all`` tab."""
        for library_list in LibraryList:
            self._lists[library_list] = []
        self._active_tab = LibraryTab.ALL
        logger.info("Cleared all library data")
        self._notify()

    # -------------------------------------------------------------------------
    # Queries over loaded videos
    # -------------------------------------------------------------------------

    def filter_videos(
        self,
        videos: Iterable[Video],
        query: str = "",
        tab: Optional[LibraryTab] = None,
    ) -> List[Video]:
        """
        Select the videos matching a search query within a tab.

        Parameters
        ----------
        videos : Iterable[Video]
            Candidate videos, in display order.
        query : str
            Case-insensitive text searched in title and description.
        tab : LibraryTab | None
            Tab to filter on; defaults to the active tab.

        Returns
        -------
        List[Video]
            Matching videos in their original order.
        """
        selected_tab = LibraryTab(tab) if tab is not None else self._active_tab
        library_list = selected_tab.library_list
        members = set(self._lists[library_list]) if library_list else None

        return [
            video
            for video in videos
            if video.matches(query) and (members is None or video.id in members)
        ]

    def next_in_playlist(
        self, current_id: str, videos: Iterable[Video]
    ) -> Optional[Video]:
        """
        Find the playlist entry that follows ``current_id``.

        A ``current_id`` that is not in the playlist is treated as sitting
        before its first entry.

        Returns
        -------
        Video | None
            The next video, or None at the end of the playlist or when the
            next ID is not among ``videos``.
        """
        playlist = self._lists[LibraryList.PLAYLIST]
        try:
            next_index = playlist.index(current_id) + 1
        except ValueError:
            next_index = 0

        if next_index >= len(playlist):
            return None

        next_id = playlist[next_index]
        return next((video for video in videos if video.id == next_id), None)

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self.snapshot)
