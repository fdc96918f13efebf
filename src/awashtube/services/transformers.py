"""
Data transformation utilities for YouTube API responses.

Provides reusable transformers for converting YouTube API response models
into display-ready awashtube ``Video`` records.
"""

from __future__ import annotations

from typing import Optional, Sequence

from awashtube.models.api_responses import Thumbnail, YouTubeVideoResponse
from awashtube.models.video import DEFAULT_QUALITIES, Video
from awashtube.utils.formatting import (
    format_duration,
    format_number,
    format_published_date,
)

# Thumbnail sizes tried in order, largest useful size first
LIST_THUMBNAIL_PREFERENCE: tuple[str, ...] = ("high", "default")
DETAIL_THUMBNAIL_PREFERENCE: tuple[str, ...] = ("maxres", "high", "default")


class VideoTransformers:
    """
    Static utility class for video transformations.

    Converts ``videos.list`` items into ``Video`` models with formatted
    dates, durations and counts.
    """

    @staticmethod
    def pick_thumbnail(
        thumbnails: dict[str, Thumbnail], preference: Sequence[str]
    ) -> str:
        """
        Pick the first available thumbnail URL by size preference.

        Parameters
        ----------
        thumbnails : dict[str, Thumbnail]
            Thumbnails keyed by size name.
        preference : Sequence[str]
            Size names in order of preference.

        Returns
        -------
        str
            The URL of the first preferred size that has one, else "".

        Examples
        --------
        >>> VideoTransformers.pick_thumbnail(
        ...     {"default": Thumbnail(url="d.jpg")}, ("high", "default")
        ... )
        'd.jpg'
        """
        for size in preference:
            thumbnail = thumbnails.get(size)
            if thumbnail is not None and thumbnail.url:
                return thumbnail.url
        return ""

    @staticmethod
    def to_video(
        item: YouTubeVideoResponse,
        thumbnail_preference: Sequence[str] = LIST_THUMBNAIL_PREFERENCE,
        qualities: Optional[Sequence[str]] = None,
    ) -> Video:
        """
        Reshape a ``videos.list`` item into a ``Video``.

        Parameters
        ----------
        item : YouTubeVideoResponse
            Video resource with snippet, contentDetails and statistics parts.
        thumbnail_preference : Sequence[str]
            Thumbnail sizes in order of preference.
        qualities : Optional[Sequence[str]]
            Qualities to offer for the video (default 360p to 1080p).

        Returns
        -------
        Video
            Display-ready video record.
        """
        snippet = item.snippet
        content_details = item.content_details
        statistics = item.statistics

        return Video(
            id=item.id,
            title=snippet.title if snippet else "",
            description=snippet.description if snippet else "",
            thumbnail=(
                VideoTransformers.pick_thumbnail(
                    snippet.thumbnails, thumbnail_preference
                )
                if snippet
                else ""
            ),
            published_at=format_published_date(
                snippet.published_at if snippet else None
            ),
            channel_title=snippet.channel_title if snippet else "",
            duration=format_duration(
                content_details.duration if content_details else None
            ),
            view_count=format_number(statistics.view_count if statistics else None),
            like_count=format_number(statistics.like_count if statistics else None),
            qualities=list(qualities if qualities is not None else DEFAULT_QUALITIES),
        )
