"""
YouTube Data API service for fetching channel videos.

Lists a channel's latest uploads with two chained calls: ``search.list``
discovers the video IDs of one page, ``videos.list`` fetches their details.
Pages are reshaped into display-ready ``Video`` records and cached in memory
for a fixed time-to-live.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from awashtube import __version__
from awashtube.exceptions import NetworkError, VideoNotFoundError, YouTubeAPIError
from awashtube.models.api_responses import (
    YouTubeSearchListResponse,
    YouTubeVideoListResponse,
)
from awashtube.models.video import Video, VideoPage
from awashtube.services.response_cache import ResponseCache
from awashtube.services.transformers import (
    DETAIL_THUMBNAIL_PREFERENCE,
    LIST_THUMBNAIL_PREFERENCE,
    VideoTransformers,
)

logger = logging.getLogger(__name__)

_DEFAULT_BASE_URL = "https://www.googleapis.com/youtube/v3"
_SEARCH_PARTS = "snippet,id"
_VIDEO_PARTS = "snippet,contentDetails,statistics"
_REQUEST_TIMEOUT_SECONDS = 30.0

ResponseModel = TypeVar("ResponseModel", bound=BaseModel)


class YouTubeService:
    """
    YouTube Data API service for a single channel.

    Parameters
    ----------
    api_key : str
        API key sent as the ``key`` query parameter.
    channel_id : str
        Channel whose uploads are listed.
    base_url : str
        Root of the YouTube Data API v3.
    timeout : float
        Per-request timeout in seconds.
    cache : ResponseCache | None
        Page cache; a fresh 5 minute cache is created when omitted.
    qualities : Sequence[str] | None
        Qualities attached to every returned video.

    Examples
    --------
    >>> service = YouTubeService(api_key="...", channel_id="UCGSroElDPOtCb8Wwhkae7qw")
    >>> page = await service.fetch_channel_videos(max_results=10)
    >>> [video.title for video in page.videos]
    """

    def __init__(
        self,
        api_key: str,
        channel_id: str,
        base_url: str = _DEFAULT_BASE_URL,
        timeout: float = _REQUEST_TIMEOUT_SECONDS,
        cache: Optional[ResponseCache] = None,
        qualities: Optional[Sequence[str]] = None,
    ) -> None:
        self.api_key = api_key
        self.channel_id = channel_id
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.cache = cache if cache is not None else ResponseCache()
        self.qualities = list(qualities) if qualities is not None else None

    async def fetch_channel_videos(
        self, max_results: int = 10, page_token: str = ""
    ) -> VideoPage:
        """
        Fetch one page of the channel's videos, newest first.

        Parameters
        ----------
        max_results : int
            Page size passed to ``search.list`` (default 10).
        page_token : str
            Token of the page to fetch; empty for the first page.

        Returns
        -------
        VideoPage
            Videos plus the pagination tokens and total from the search call.
            A page without any video results is returned empty and is not
            cached.

        Raises
        ------
        YouTubeAPIError
            If either call returns a non-successful status or an unexpected body.
        NetworkError
            If a request cannot be completed.
        """
        cache_key = ResponseCache.make_key(self.channel_id, max_results, page_token)
        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.debug("Serving channel page from cache: %s", cache_key)
            return cached

        try:
            search_data = await self._get_json(
                "search",
                {
                    "key": self.api_key,
                    "channelId": self.channel_id,
                    "part": _SEARCH_PARTS,
                    "order": "date",
                    "maxResults": max_results,
                    "pageToken": page_token,
                },
            )
            search = self._parse(YouTubeSearchListResponse, search_data)

            video_ids = search.video_ids()
            if not video_ids:
                return VideoPage()

            videos_data = await self._get_json(
                "videos",
                {
                    "key": self.api_key,
                    "id": ",".join(video_ids),
                    "part": _VIDEO_PARTS,
                },
            )
            details = self._parse(YouTubeVideoListResponse, videos_data)

            page = VideoPage(
                videos=[
                    VideoTransformers.to_video(
                        item, LIST_THUMBNAIL_PREFERENCE, self.qualities
                    )
                    for item in details.items
                ],
                next_page_token=search.next_page_token,
                prev_page_token=search.prev_page_token,
                total_results=(
                    search.page_info.total_results if search.page_info else None
                ),
            )
        except Exception as e:
            logger.error("Failed to fetch YouTube videos: %s", e)
            raise

        self.cache.set(cache_key, page)
        return page

    async def fetch_video_details(self, video_id: str) -> Video:
        """
        Fetch details for a single video.

        Parameters
        ----------
        video_id : str
            The video to fetch.

        Returns
        -------
        Video
            Display-ready video using the largest available thumbnail.

        Raises
        ------
        VideoNotFoundError
            If the API returns no item for ``video_id``.
        YouTubeAPIError
            If the call returns a non-successful status or an unexpected body.
        NetworkError
            If the request cannot be completed.
        """
        try:
            data = await self._get_json(
                "videos",
                {"key": self.api_key, "id": video_id, "part": _VIDEO_PARTS},
            )
            details = self._parse(YouTubeVideoListResponse, data)
            if not details.items:
                raise VideoNotFoundError(video_id)
            return VideoTransformers.to_video(
                details.items[0], DETAIL_THUMBNAIL_PREFERENCE, self.qualities
            )
        except Exception as e:
            logger.error("Failed to fetch video details: %s", e)
            raise

    async def _get_json(self, endpoint: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Issue a GET against ``{base_url}/{endpoint}`` and decode the JSON body.

        Raises
        ------
        YouTubeAPIError
            For any non-2xx status; the Google error reason is attached when
            the body carries one.
        NetworkError
            For requests that fail before a response arrives (connection
            errors, timeouts, redirect loops, undecodable content).
        """
        url = f"{self.base_url}/{endpoint}"
        headers = {"User-Agent": f"awashtube/{__version__}"}

        async with httpx.AsyncClient(follow_redirects=True) as client:
            try:
                response = await client.get(
                    url, params=params, headers=headers, timeout=self.timeout
                )
            except httpx.RequestError as e:
                raise NetworkError(
                    message=f"Request to YouTube API {endpoint} failed: {type(e).__name__}",
                    original_error=e,
                ) from e

        if not response.is_success:
            raise YouTubeAPIError.from_status(
                response.status_code, self._error_reason(response)
            )

        try:
            body = response.json()
        except ValueError as e:
            raise YouTubeAPIError(
                message=f"YouTube API returned invalid JSON for {endpoint}",
                status_code=response.status_code,
            ) from e

        if not isinstance(body, dict):
            raise YouTubeAPIError(
                message=f"YouTube API returned an unexpected body for {endpoint}",
                status_code=response.status_code,
            )
        return body

    @staticmethod
    def _parse(
        model: Type[ResponseModel], data: Dict[str, Any]
    ) -> ResponseModel:
        """Validate a response body, mapping validation failures to YouTubeAPIError."""
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise YouTubeAPIError(
                message=f"Unexpected YouTube API response shape: {e.error_count()} error(s)"
            ) from e

    @staticmethod
    def _error_reason(response: httpx.Response) -> Optional[str]:
        """Extract ``error.errors[0].reason`` from a Google API error body."""
        try:
            body = response.json()
        except ValueError:
            return None
        if not isinstance(body, dict):
            return None
        error = body.get("error")
        if not isinstance(error, dict):
            return None
        errors = error.get("errors")
        if isinstance(errors, list) and errors and isinstance(errors[0], dict):
            reason = errors[0].get("reason")
            return str(reason) if reason else None
        return None
