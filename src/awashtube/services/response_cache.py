"""
In-memory cache for channel video pages.

Entries are keyed on the request that produced them (channel, page size and
page token) and stay valid for a fixed time-to-live. There is no size bound
and no eviction beyond dropping an expired entry when it is read.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from awashtube.models.video import VideoPage

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 300.0


@dataclass(frozen=True)
class CacheEntry:
    """A cached page and the clock reading at which it was stored."""

    timestamp: float
    data: VideoPage

    def is_valid(self, now: float, ttl_seconds: float) -> bool:
        """Check whether the entry is still fresh at ``now``."""
        return now - self.timestamp < ttl_seconds


class ResponseCache:
    """
    Time-based cache of ``VideoPage`` results.

    Parameters
    ----------
    ttl_seconds : float
        How long an entry stays valid (default 5 minutes).
    clock : Callable[[], float]
        Monotonic clock used for timestamps; injectable for tests.

    Examples
    --------
    >>> cache = ResponseCache()
    >>> key = ResponseCache.make_key("UCGSroElDPOtCb8Wwhkae7qw", 10, "")
    >>> cache.set(key, VideoPage())
    >>> cache.get(key)
    VideoPage(videos=[], next_page_token=None, prev_page_token=None, total_results=None)
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}

    @staticmethod
    def make_key(channel_id: str, max_results: int, page_token: str = "") -> str:
        """Build the cache key for a channel page request."""
        return f"{channel_id}-{max_results}-{page_token}"

    def get(self, key: str) -> Optional[VideoPage]:
        """
        Return the cached page for ``key`` if it is still fresh.

        Expired entries are removed and reported as a miss. Hits are copies,
        so callers may modify them freely.
        """
        entry = self._entries.get(key)
        if entry is None:
            return None

        if not entry.is_valid(self._clock(), self.ttl_seconds):
            logger.debug("Cache entry expired for %s", key)
            del self._entries[key]
            return None

        return entry.data.model_copy(deep=True)

    def set(self, key: str, data: VideoPage) -> None:
        """Store a copy of ``data`` under ``key``, replacing any previous entry."""
        self._entries[key] = CacheEntry(
            timestamp=self._clock(), data=data.model_copy(deep=True)
        )

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        entry = self._entries.get(key)
        return entry is not None and entry.is_valid(self._clock(), self.ttl_seconds)
