"""
Tests for library file persistence and debounced saving.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from awashtube.exceptions import LibraryStorageError
from awashtube.models.enums import LibraryTab
from awashtube.models.library import LibrarySnapshot
from awashtube.services.library_store import DebouncedSaver, LibraryStore
from tests.factories import LibrarySnapshotFactory


@pytest.fixture
def store(tmp_path: Path) -> LibraryStore:
    return LibraryStore(tmp_path / "data" / "library.json")


class TestLibraryStoreLoad:
    """Test reading the library file."""

    def test_missing_file_gives_defaults(self, store: LibraryStore) -> None:
        """Test a first run starts with an empty library."""
        assert store.load() == LibrarySnapshot()

    def test_reads_camel_case_keys(self, store: LibraryStore) -> None:
        """Test the stored key names are read."""
        store.path.parent.mkdir(parents=True)
        store.path.write_text(
            json.dumps(
                {
                    "favorites": ["a"],
                    "history": ["b", "c"],
                    "playlist": ["d"],
                    "watchLater": ["e"],
                    "activeTab": "watchLater",
                }
            )
        )

        snapshot = store.load()

        assert snapshot.favorites == ["a"]
        assert snapshot.history == ["b", "c"]
        assert snapshot.playlist == ["d"]
        assert snapshot.watch_later == ["e"]
        assert snapshot.active_tab is LibraryTab.WATCH_LATER

    def test_corrupt_file_gives_defaults(
        self, store: LibraryStore, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test unparseable JSON is logged and ignored."""
        store.path.parent.mkdir(parents=True)
        store.path.write_text("{not json")

        assert store.load() == LibrarySnapshot()
        assert "Error reading library" in caplog.text

    def test_non_object_gives_defaults(self, store: LibraryStore) -> None:
        """Test a JSON array at the top level is ignored."""
        store.path.parent.mkdir(parents=True)
        store.path.write_text("[1, 2]")

        assert store.load() == LibrarySnapshot()

    def test_malformed_key_falls_back_individually(self, store: LibraryStore) -> None:
        """Test one bad key does not discard the others."""
        store.path.parent.mkdir(parents=True)
        store.path.write_text(
            json.dumps(
                {
                    "favorites": "oops",
                    "history": [1, 2],
                    "playlist": ["d"],
                    "activeTab": "nonsense",
                }
            )
        )

        snapshot = store.load()

        assert snapshot.favorites == []
        assert snapshot.history == []
        assert snapshot.playlist == ["d"]
        assert snapshot.watch_later == []
        assert snapshot.active_tab is LibraryTab.ALL


class TestLibraryStoreSave:
    """Test writing the library file."""

    def test_save_then_load(self, store: LibraryStore) -> None:
        """Test a saved snapshot is read back unchanged."""
        snapshot = LibrarySnapshotFactory.build(active_tab=LibraryTab.FAVORITES)

        store.save(snapshot)

        assert store.load() == snapshot

    def test_writes_camel_case_keys(self, store: LibraryStore) -> None:
        """Test the file uses the stored key names."""
        store.save(LibrarySnapshot(watch_later=["x"]))

        data = json.loads(store.path.read_text())
        assert data == {
            "favorites": [],
            "history": [],
            "playlist": [],
            "watchLater": ["x"],
            "activeTab": "all",
        }

    def test_leaves_no_temporary_files(self, store: LibraryStore) -> None:
        """Test the atomic write cleans up after itself."""
        store.save(LibrarySnapshot())
        store.save(LibrarySnapshot(favorites=["a"]))

        assert [p.name for p in store.path.parent.iterdir()] == ["library.json"]

    def test_unwritable_location_raises(self, tmp_path: Path) -> None:
        """Test write failures raise LibraryStorageError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")
        store = LibraryStore(blocker / "library.json")

        with pytest.raises(LibraryStorageError) as exc_info:
            store.save(LibrarySnapshot())

        assert exc_info.value.path == store.path


class TestLibraryStoreClear:
    """Test deleting the library file."""

    def test_removes_file(self, store: LibraryStore) -> None:
        """Test the file is deleted."""
        store.save(LibrarySnapshotFactory.build())

        store.clear()

        assert not store.path.exists()
        assert store.load() == LibrarySnapshot()

    def test_missing_file_is_fine(self, store: LibraryStore) -> None:
        """Test clearing twice does not fail."""
        store.clear()
        store.clear()


class TestDebouncedSaverWithoutLoop:
    """Test saving outside an event loop."""

    def test_writes_immediately(self, store: LibraryStore) -> None:
        """Test each change is written straight away."""
        saver = DebouncedSaver(store, delay=10)

        saver.schedule(LibrarySnapshot(favorites=["a"]))

        assert not saver.pending
        assert store.load().favorites == ["a"]

    def test_write_errors_are_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test storage failures are logged and not raised."""
        store = MagicMock(spec=LibraryStore)
        store.save.side_effect = LibraryStorageError("disk full")
        saver = DebouncedSaver(store)

        saver.schedule(LibrarySnapshot())

        assert "Error saving library: disk full" in caplog.text


class TestDebouncedSaverInLoop:
    """Test debouncing inside a running event loop."""

    async def test_burst_produces_single_write(self) -> None:
        """Test only the last snapshot of a burst is written."""
        store = MagicMock(spec=LibraryStore)
        saver = DebouncedSaver(store, delay=0.01)

        saver.schedule(LibrarySnapshot(favorites=["a"]))
        saver.schedule(LibrarySnapshot(favorites=["a", "b"]))
        saver.schedule(LibrarySnapshot(favorites=["a", "b", "c"]))

        assert saver.pending
        store.save.assert_not_called()

        await asyncio.sleep(0.05)

        store.save.assert_called_once_with(LibrarySnapshot(favorites=["a", "b", "c"]))
        assert not saver.pending

    async def test_flush_writes_pending_now(self) -> None:
        """Test flush writes without waiting for the timer."""
        store = MagicMock(spec=LibraryStore)
        saver = DebouncedSaver(store, delay=10)

        saver.schedule(LibrarySnapshot(history=["a"]))
        saver.flush()

        store.save.assert_called_once_with(LibrarySnapshot(history=["a"]))
        assert not saver.pending

    async def test_flush_without_pending_is_noop(self) -> None:
        """Test flush does nothing when no write is waiting."""
        store = MagicMock(spec=LibraryStore)
        saver = DebouncedSaver(store)

        saver.flush()

        store.save.assert_not_called()
