"""
Data models module for awashtube.

Defines Pydantic models for YouTube API responses, display-ready videos and
the locally persisted library.
"""

from __future__ import annotations

from .enums import LibraryList, LibraryTab, PlayerAction
from .library import LibrarySnapshot, LibraryStats
from .video import DEFAULT_QUALITIES, DownloadRequest, ShareData, Video, VideoPage
from .youtube_types import ChannelId, VideoId

__all__ = [
    # Enums
    "LibraryList",
    "LibraryTab",
    "PlayerAction",
    # Library
    "LibrarySnapshot",
    "LibraryStats",
    # Videos
    "DEFAULT_QUALITIES",
    "DownloadRequest",
    "ShareData",
    "Video",
    "VideoPage",
    # Types
    "ChannelId",
    "VideoId",
]
