"""
Pydantic models for the YouTube Data API v3 bodies the browser reads.

Only two endpoints are called: ``search.list`` returns the IDs of the
channel's newest uploads, and ``videos.list`` returns the snippet, content
details and statistics for those IDs. Fields are declared in snake_case and
read from the API's camelCase keys; anything not declared is ignored.

References:
- https://developers.google.com/youtube/v3/docs/search/list
- https://developers.google.com/youtube/v3/docs/videos/list
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .youtube_types import VideoId

logger = logging.getLogger(__name__)


class BaseYouTubeModel(BaseModel):
    """Shared config: camelCase aliases, snake_case names accepted, extras ignored."""

    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )


# =============================================================================
# Shared parts
# =============================================================================


class Thumbnail(BaseYouTubeModel):
    """One thumbnail size (``default``, ``medium``, ``high``, ``standard``, ``maxres``)."""

    url: str = ""
    width: int = 0
    height: int = 0


def _thumbnail_map(v: Any) -> dict[str, Thumbnail]:
    """Keep the well-formed entries of a ``thumbnails`` object."""
    if not isinstance(v, dict):
        return {}
    return {
        size: thumb if isinstance(thumb, Thumbnail) else Thumbnail.model_validate(thumb)
        for size, thumb in v.items()
        if isinstance(thumb, (dict, Thumbnail))
    }


class ResourceId(BaseYouTubeModel):
    """
    The resource a search result points at.

    Results for the channel itself or its playlists come back alongside
    videos; only ``youtube#video`` results carry ``videoId``.
    """

    kind: str = ""
    video_id: Optional[str] = None
    channel_id: Optional[str] = None
    playlist_id: Optional[str] = None


class PageInfo(BaseYouTubeModel):
    total_results: int = Field(default=0, description="Total results across all pages")


# =============================================================================
# search.list
# =============================================================================


class SearchSnippet(BaseYouTubeModel):
    published_at: Optional[datetime] = None
    channel_id: str = ""
    title: str = ""


class YouTubeSearchResponse(BaseYouTubeModel):
    """A single ``search.list`` result."""

    id: ResourceId
    snippet: Optional[SearchSnippet] = None


class YouTubeSearchListResponse(BaseYouTubeModel):
    """
    Body of a ``search.list`` call.

    Attributes
    ----------
    next_page_token, prev_page_token : str | None
        Opaque tokens for the neighbouring pages; absent at either end.
    page_info : PageInfo | None
        Carries the channel's total result count.
    items : list[YouTubeSearchResponse]
        Results in the requested (date) order.
    """

    next_page_token: Optional[str] = None
    prev_page_token: Optional[str] = None
    page_info: Optional[PageInfo] = None
    items: list[YouTubeSearchResponse] = Field(default_factory=list)

    def video_ids(self) -> list[str]:
        """IDs of the video results, in response order."""
        return [
            item.id.video_id
            for item in self.items
            if item.id.kind == "youtube#video" and item.id.video_id
        ]


# =============================================================================
# videos.list
# =============================================================================


class VideoSnippet(BaseYouTubeModel):
    published_at: datetime
    channel_id: str = ""
    channel_title: str = ""
    title: str = ""
    description: str = ""
    thumbnails: dict[str, Thumbnail] = Field(default_factory=dict)

    @field_validator("thumbnails", mode="before")
    @classmethod
    def parse_thumbnails(cls, v: Any) -> dict[str, Thumbnail]:
        return _thumbnail_map(v)


class VideoContentDetails(BaseYouTubeModel):
    duration: str = Field(default="PT0S", description="ISO 8601 duration, e.g. PT1H2M3S")


class VideoStatisticsResponse(BaseYouTubeModel):
    """
    Public counters of a video.

    The API sends counts as decimal strings. A count the owner hides is
    missing from the body and stays None here.
    """

    view_count: Optional[int] = None
    like_count: Optional[int] = None

    @field_validator("view_count", "like_count", mode="before")
    @classmethod
    def parse_count(cls, v: Any) -> Optional[int]:
        if v is None or isinstance(v, int):
            return v
        try:
            return int(v)
        except (TypeError, ValueError):
            logger.debug("Ignoring non-numeric statistic %r", v)
            return None


class YouTubeVideoResponse(BaseYouTubeModel):
    """A single ``videos.list`` item; each part is None when not requested."""

    id: VideoId
    snippet: Optional[VideoSnippet] = None
    content_details: Optional[VideoContentDetails] = None
    statistics: Optional[VideoStatisticsResponse] = None


class YouTubeVideoListResponse(BaseYouTubeModel):
    """Body of a ``videos.list`` call."""

    items: list[YouTubeVideoResponse] = Field(default_factory=list)


__all__ = [
    "BaseYouTubeModel",
    "Thumbnail",
    "ResourceId",
    "PageInfo",
    "SearchSnippet",
    "YouTubeSearchResponse",
    "YouTubeSearchListResponse",
    "VideoSnippet",
    "VideoContentDetails",
    "VideoStatisticsResponse",
    "YouTubeVideoResponse",
    "YouTubeVideoListResponse",
]
