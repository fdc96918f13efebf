"""
Tests for the in-memory library service.
"""

from __future__ import annotations

from typing import List

import pytest

from awashtube.models.enums import LibraryList, LibraryTab
from awashtube.models.library import LibrarySnapshot
from awashtube.models.video import Video
from awashtube.services.library_service import LibraryService
from tests.factories import LibrarySnapshotFactory, VideoFactory


@pytest.fixture
def videos() -> List[Video]:
    return [
        VideoFactory.build(id="aaaaaaaaaaa", title="Python Tutorial", description="Basics"),
        VideoFactory.build(id="bbbbbbbbbbb", title="Cooking Show", description="Advanced python tips"),
        VideoFactory.build(id="ccccccccccc", title="Travel Vlog", description="Mountains"),
    ]


class TestInitialState:
    """Test construction from a snapshot."""

    def test_empty_by_default(self, library: LibraryService) -> None:
        """Test a new library has empty lists and the all tab."""
        assert library.snapshot == LibrarySnapshot()
        assert library.active_tab is LibraryTab.ALL
        assert not library.stats().has_data

    def test_restores_snapshot(self) -> None:
        """Test lists and tab are taken from the snapshot."""
        snapshot = LibrarySnapshotFactory.build(active_tab=LibraryTab.PLAYLIST)
        library = LibraryService(snapshot)

        assert library.favorites == ["vid00000001"]
        assert library.history == ["vid00000001", "vid00000002"]
        assert library.playlist == ["vid00000003"]
        assert library.watch_later == ["vid00000004"]
        assert library.active_tab is LibraryTab.PLAYLIST
        assert library.stats().total == 5

    def test_returned_lists_are_copies(self, library: LibraryService) -> None:
        """Test callers cannot mutate the internal lists."""
        library.toggle_favorite("aaaaaaaaaaa")
        library.favorites.append("zzzzzzzzzzz")

        assert library.favorites == ["aaaaaaaaaaa"]


class TestToggle:
    """Test adding and removing list entries."""

    @pytest.mark.parametrize("library_list", list(LibraryList))
    def test_toggle_twice_restores_list(
        self, library: LibraryService, library_list: LibraryList
    ) -> None:
        """Test toggling adds and then removes the ID."""
        assert library.toggle(library_list, "aaaaaaaaaaa") is True
        assert library.contains(library_list, "aaaaaaaaaaa")

        assert library.toggle(library_list, "aaaaaaaaaaa") is False
        assert library.get_list(library_list) == []

    def test_appends_in_insertion_order(self, library: LibraryService) -> None:
        """Test new IDs go to the end of the list."""
        library.toggle_playlist("aaaaaaaaaaa")
        library.toggle_playlist("bbbbbbbbbbb")
        library.toggle_playlist("ccccccccccc")
        library.toggle_playlist("bbbbbbbbbbb")

        assert library.playlist == ["aaaaaaaaaaa", "ccccccccccc"]

    def test_lists_are_independent(self, library: LibraryService) -> None:
        """Test toggling one list leaves the others untouched."""
        library.toggle_favorite("aaaaaaaaaaa")
        library.toggle_watch_later("bbbbbbbbbbb")

        assert library.favorites == ["aaaaaaaaaaa"]
        assert library.watch_later == ["bbbbbbbbbbb"]
        assert library.playlist == []
        assert library.history == []


class TestHistory:
    """Test recording watched videos."""

    def test_records_once(self, library: LibraryService) -> None:
        """Test a video appears in the history only once."""
        assert library.record_history("aaaaaaaaaaa") is True
        assert library.record_history("bbbbbbbbbbb") is True
        assert library.record_history("aaaaaaaaaaa") is False

        assert library.history == ["aaaaaaaaaaa", "bbbbbbbbbbb"]


class TestChangeNotification:
    """Test the on_change callback."""

    def test_every_mutation_notifies(self) -> None:
        """Test toggles, history, tab changes and clearing all notify."""
        snapshots: List[LibrarySnapshot] = []
        library = LibraryService(on_change=snapshots.append)

        library.toggle_favorite("aaaaaaaaaaa")
        library.record_history("aaaaaaaaaaa")
        library.set_active_tab(LibraryTab.FAVORITES)
        library.clear_all()

        assert len(snapshots) == 4
        assert snapshots[0].favorites == ["aaaaaaaaaaa"]
        assert snapshots[1].history == ["aaaaaaaaaaa"]
        assert snapshots[2].active_tab is LibraryTab.FAVORITES
        assert snapshots[3] == LibrarySnapshot()

    def test_duplicate_history_does_not_notify(self) -> None:
        """Test an unchanged history produces no notification."""
        snapshots: List[LibrarySnapshot] = []
        library = LibraryService(
            LibrarySnapshot(history=["aaaaaaaaaaa"]), on_change=snapshots.append
        )

        library.record_history("aaaaaaaaaaa")

        assert snapshots == []


class TestClearAll:
    """Test clearing the library."""

    def test_empties_lists_and_resets_tab(self) -> None:
        """Test every list is emptied and the tab returns to all."""
        library = LibraryService(LibrarySnapshotFactory.build(active_tab=LibraryTab.HISTORY))

        library.clear_all()

        assert library.stats().total == 0
        assert library.active_tab is LibraryTab.ALL


class TestFilterVideos:
    """Test search and tab filtering."""

    def test_empty_query_on_all_tab_keeps_everything(
        self, library: LibraryService, videos: List[Video]
    ) -> None:
        """Test no filtering happens without a query on the all tab."""
        assert library.filter_videos(videos) == videos

    def test_query_matches_title_or_description(
        self, library: LibraryService, videos: List[Video]
    ) -> None:
        """Test the query is a case-insensitive substring search."""
        result = library.filter_videos(videos, "PYTHON")

        assert [video.id for video in result] == ["aaaaaaaaaaa", "bbbbbbbbbbb"]

    def test_query_without_matches(
        self, library: LibraryService, videos: List[Video]
    ) -> None:
        """Test a query matching nothing yields an empty list."""
        assert library.filter_videos(videos, "zzz") == []

    def test_tab_restricts_to_list_members(
        self, library: LibraryService, videos: List[Video]
    ) -> None:
        """Test a list tab keeps only videos in that list, in page order."""
        library.toggle_favorite("ccccccccccc")
        library.toggle_favorite("aaaaaaaaaaa")

        result = library.filter_videos(videos, tab=LibraryTab.FAVORITES)

        assert [video.id for video in result] == ["aaaaaaaaaaa", "ccccccccccc"]

    def test_defaults_to_active_tab(
        self, library: LibraryService, videos: List[Video]
    ) -> None:
        """Test the active tab is used when no tab is given."""
        library.toggle_watch_later("bbbbbbbbbbb")
        library.set_active_tab(LibraryTab.WATCH_LATER)

        result = library.filter_videos(videos, "python")

        assert [video.id for video in result] == ["bbbbbbbbbbb"]

    def test_ids_not_loaded_are_ignored(
        self, library: LibraryService, videos: List[Video]
    ) -> None:
        """Test list entries missing from the page do not appear."""
        library.toggle_playlist("zzzzzzzzzzz")

        assert library.filter_videos(videos, tab=LibraryTab.PLAYLIST) == []


class TestNextInPlaylist:
    """Test playlist advancing."""

    def test_returns_following_entry(self, videos: List[Video]) -> None:
        """Test the entry after the current one is returned."""
        library = LibraryService(LibrarySnapshot(playlist=["aaaaaaaaaaa", "ccccccccccc"]))

        assert library.next_in_playlist("aaaaaaaaaaa", videos).id == "ccccccccccc"

    def test_end_of_playlist(self, videos: List[Video]) -> None:
        """Test None is returned after the last entry."""
        library = LibraryService(LibrarySnapshot(playlist=["aaaaaaaaaaa", "ccccccccccc"]))

        assert library.next_in_playlist("ccccccccccc", videos) is None

    def test_current_not_in_playlist_starts_at_first(self, videos: List[Video]) -> None:
        """Test a video outside the playlist advances to the first entry."""
        library = LibraryService(LibrarySnapshot(playlist=["bbbbbbbbbbb"]))

        assert library.next_in_playlist("aaaaaaaaaaa", videos).id == "bbbbbbbbbbb"

    def test_next_not_loaded(self, videos: List[Video]) -> None:
        """Test None is returned when the next ID is not among the videos."""
        library = LibraryService(LibrarySnapshot(playlist=["aaaaaaaaaaa", "zzzzzzzzzzz"]))

        assert library.next_in_playlist("aaaaaaaaaaa", videos) is None

    def test_empty_playlist(self, library: LibraryService, videos: List[Video]) -> None:
        """Test an empty playlist never advances."""
        assert library.next_in_playlist("aaaaaaaaaaa", videos) is None
