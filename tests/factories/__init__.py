"""Factory-boy factories and YouTube API payload builders for tests."""

from tests.factories.library_factory import LibrarySnapshotFactory
from tests.factories.video_factory import VideoFactory, VideoPageFactory
from tests.factories.youtube_payloads import (
    make_error_body,
    make_search_item,
    make_search_response,
    make_video_item,
    make_videos_response,
)

__all__ = [
    "LibrarySnapshotFactory",
    "VideoFactory",
    "VideoPageFactory",
    "make_error_body",
    "make_search_item",
    "make_search_response",
    "make_video_item",
    "make_videos_response",
]
