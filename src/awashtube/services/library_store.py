"""
File-backed persistence for the library.

``LibraryStore`` keeps the library in a single JSON object whose keys are the
list names (``favorites``, ``history``, ``playlist``, ``watchLater``) and the
last selected tab (``activeTab``). Reading is forgiving: a missing file, a
corrupt file or a malformed key falls back to defaults. Writing is atomic.

``DebouncedSaver`` delays writes inside a running event loop so that a burst
of changes produces a single write of the latest state.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional

from awashtube.exceptions import LibraryStorageError
from awashtube.models.enums import LibraryList, LibraryTab
from awashtube.models.library import LibrarySnapshot

logger = logging.getLogger(__name__)

ACTIVE_TAB_KEY = "activeTab"
DEFAULT_DEBOUNCE_SECONDS = 0.3


class LibraryStore:
    """
    JSON file store for a ``LibrarySnapshot``.

    Parameters
    ----------
    path : Path
        Location of the library file. Parent directories are created on save.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> LibrarySnapshot:
        """
        Read the library, falling back to defaults for anything unreadable.

        Returns
        -------
        LibrarySnapshot
            Stored lists and tab. Keys that are missing, hold a non-list or
            hold non-string IDs come back empty; an unknown tab comes back as
            ``all``.
        """
        raw = self._read_raw()

        lists: Dict[str, List[str]] = {}
        for library_list in LibraryList:
            lists[library_list.value] = self._read_list(raw, library_list.value)

        return LibrarySnapshot.model_validate(
            {**lists, ACTIVE_TAB_KEY: self._read_tab(raw)}
        )

    def save(self, snapshot: LibrarySnapshot) -> None:
        """
        Write the whole library, replacing the previous file atomically.

        Raises
        ------
        LibraryStorageError
            If the file cannot be written.
        """
        payload = snapshot.model_dump(mode="json", by_alias=True)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as tmp_file:
                    json.dump(payload, tmp_file, indent=2)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise LibraryStorageError(
                message=f"Could not write library file {self.path}: {e}",
                path=self.path,
                original_error=e,
            ) from e

        logger.debug("Saved library to %s", self.path)

    def clear(self) -> None:
        """Delete the library file if it exists."""
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            raise LibraryStorageError(
                message=f"Could not delete library file {self.path}: {e}",
                path=self.path,
                original_error=e,
            ) from e

    def _read_raw(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.error("Error reading library from %s: %s", self.path, e)
            return {}

        if not isinstance(data, dict):
            logger.error("Error reading library from %s: not a JSON object", self.path)
            return {}
        return data

    @staticmethod
    def _read_list(raw: Dict[str, Any], key: str) -> List[str]:
        value = raw.get(key)
        if value is None:
            return []
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            logger.error("Error reading %s from library: expected a list of IDs", key)
            return []
        return list(value)

    @staticmethod
    def _read_tab(raw: Dict[str, Any]) -> LibraryTab:
        value = raw.get(ACTIVE_TAB_KEY)
        if value is None:
            return LibraryTab.ALL
        try:
            return LibraryTab(value)
        except ValueError:
            logger.error("Error reading %s from library: unknown tab %r", ACTIVE_TAB_KEY, value)
            return LibraryTab.ALL


class DebouncedSaver:
    """
    Delay library writes until changes settle.

    Inside a running event loop each ``schedule`` call cancels the pending
    write and arms a new timer, so only the latest snapshot is written once
    ``delay`` seconds pass without another change. Outside an event loop the
    snapshot is written immediately.

    Write failures are logged and never raised.

    Parameters
    ----------
    store : LibraryStore
        Destination of the writes.
    delay : float
        Seconds to wait after the last change (default 0.3).
    """

    def __init__(self, store: LibraryStore, delay: float = DEFAULT_DEBOUNCE_SECONDS) -> None:
        self.store = store
        self.delay = delay
        self._pending: Optional[LibrarySnapshot] = None
        self._handle: Optional[asyncio.TimerHandle] = None

    @property
    def pending(self) -> bool:
        """True while a write is waiting for its timer."""
        return self._pending is not None

    def schedule(self, snapshot: LibrarySnapshot) -> None:
        """Arrange for ``snapshot`` to be written after the debounce delay."""
        self._cancel_timer()

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self._pending = None
            self._write(snapshot)
            return

        self._pending = snapshot
        self._handle = loop.call_later(self.delay, self.flush)

    def flush(self) -> None:
        """Write the pending snapshot now, if any."""
        self._cancel_timer()
        snapshot, self._pending = self._pending, None
        if snapshot is not None:
            self._write(snapshot)

    def _cancel_timer(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _write(self, snapshot: LibrarySnapshot) -> None:
        try:
            self.store.save(snapshot)
        except LibraryStorageError as e:
            logger.error("Error saving library: %s", e)
