"""Video API schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from awashtube.api.schemas.responses import ApiResponse
from awashtube.models.enums import LibraryTab
from awashtube.models.video import DownloadRequest, ShareData, Video


class VideoList(BaseModel):
    """One page of videos after search and tab filtering."""

    videos: List[Video]
    tab: LibraryTab
    query: str = ""
    loaded: int  # videos on the page before filtering
    next_page_token: Optional[str] = None
    prev_page_token: Optional[str] = None
    total_results: Optional[int] = None


class PlayResult(BaseModel):
    """A video opened in the player."""

    video: Video
    embed_url: str
    added_to_history: bool


class VideoListResponse(ApiResponse[VideoList]):
    """Response for the video list endpoint."""

    pass


class VideoDetailResponse(ApiResponse[Video]):
    """Response for the video detail endpoint."""

    pass


class PlayResponse(ApiResponse[PlayResult]):
    """Response for the play endpoint."""

    pass


class ShareResponse(ApiResponse[ShareData]):
    """Response for the share endpoint."""

    pass


class DownloadResponse(ApiResponse[DownloadRequest]):
    """Response for the download endpoint."""

    pass
