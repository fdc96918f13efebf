"""
Video models for the channel browser.

Defines the display-ready video record produced from YouTube API responses,
the page of videos returned by a channel fetch, and the payloads produced
by the share and download actions.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .youtube_types import VideoId

DEFAULT_QUALITIES: tuple[str, ...] = ("360p", "480p", "720p", "1080p")


class Video(BaseModel):
    """
    A channel video, reshaped for display.

    Every field except ``id`` is an already-formatted display string: dates
    are ``M/D/YYYY``, durations ``M:SS`` or ``H:MM:SS`` and counts carry
    thousands separators.
    """

    model_config = ConfigDict(frozen=True)

    id: VideoId
    title: str = Field(default="", description="Video title")
    description: str = Field(default="", description="Video description")
    thumbnail: str = Field(default="", description="Thumbnail URL")
    published_at: str = Field(default="", description="Formatted publish date")
    channel_title: str = Field(default="", description="Channel name")
    duration: str = Field(default="", description="Formatted duration")
    view_count: str = Field(default="", description="Formatted view count")
    like_count: str = Field(default="", description="Formatted like count")
    qualities: List[str] = Field(
        default_factory=lambda: list(DEFAULT_QUALITIES),
        description="Qualities offered in the player and for download",
    )

    def matches(self, query: str) -> bool:
        """
        Check whether the title or description contains ``query``.

        Matching is a case-insensitive substring test; an empty query matches
        every video.
        """
        needle = query.lower()
        return needle in self.title.lower() or needle in self.description.lower()


class VideoPage(BaseModel):
    """One page of channel videos plus the search call's pagination data."""

    videos: List[Video] = Field(default_factory=list)
    next_page_token: Optional[str] = Field(default=None)
    prev_page_token: Optional[str] = Field(default=None)
    total_results: Optional[int] = Field(default=None, ge=0)


class ShareData(BaseModel):
    """Payload handed to a share target for a video."""

    title: str
    text: str
    url: str


class DownloadRequest(BaseModel):
    """Acknowledgement of a download request; no file is produced."""

    video_id: str
    title: str
    quality: str
    message: str
