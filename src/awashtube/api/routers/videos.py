"""Video list, detail and player endpoints."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query

from awashtube.api.deps import get_browser_session
from awashtube.api.schemas.videos import (
    DownloadResponse,
    PlayResponse,
    PlayResult,
    ShareResponse,
    VideoDetailResponse,
    VideoList,
    VideoListResponse,
)
from awashtube.exceptions import BadRequestError, NotFoundError, VideoNotFoundError
from awashtube.models.enums import LibraryList, LibraryTab
from awashtube.models.video import Video
from awashtube.services.browser import BrowserSession

logger = logging.getLogger(__name__)

router = APIRouter()


async def _fetch_video(session: BrowserSession, video_id: str) -> Video:
    try:
        return await session.youtube_service.fetch_video_details(video_id)
    except VideoNotFoundError as e:
        raise NotFoundError(resource_type="Video", identifier=video_id) from e


@router.get("/videos", response_model=VideoListResponse)
async def list_videos(
    q: str = Query("", description="Search text matched against title and description"),
    tab: Optional[LibraryTab] = Query(
        None, description="Library tab to filter on; defaults to the selected tab"
    ),
    max_results: Optional[int] = Query(
        None, ge=1, le=50, description="Videos to request from the channel"
    ),
    page_token: str = Query("", description="Page token from a previous response"),
    session: BrowserSession = Depends(get_browser_session),
) -> VideoListResponse:
    """List one page of the channel's videos, filtered by search text and tab."""
    page = await session.youtube_service.fetch_channel_videos(
        max_results=max_results or session.page_size, page_token=page_token
    )
    selected_tab = tab if tab is not None else session.library.active_tab
    logger.debug("Filtering %d videos for tab %s", len(page.videos), selected_tab.value)

    return VideoListResponse(
        data=VideoList(
            videos=session.library.filter_videos(page.videos, q, selected_tab),
            tab=selected_tab,
            query=q,
            loaded=len(page.videos),
            next_page_token=page.next_page_token,
            prev_page_token=page.prev_page_token,
            total_results=page.total_results,
        )
    )


@router.get("/videos/{video_id}", response_model=VideoDetailResponse)
async def get_video(
    video_id: str = Path(..., min_length=1, description="YouTube video ID"),
    session: BrowserSession = Depends(get_browser_session),
) -> VideoDetailResponse:
    """Get the details of a single video."""
    return VideoDetailResponse(data=await _fetch_video(session, video_id))


@router.post("/videos/{video_id}/play", response_model=PlayResponse)
async def play_video(
    video_id: str = Path(..., min_length=1, description="YouTube video ID"),
    session: BrowserSession = Depends(get_browser_session),
) -> PlayResponse:
    """Open a video in the player and record it in the history."""
    video = await _fetch_video(session, video_id)
    added = not session.library.contains(LibraryList.HISTORY, video.id)
    embed_url = session.play_video(video)
    return PlayResponse(
        data=PlayResult(video=video, embed_url=embed_url, added_to_history=added)
    )


@router.get("/videos/{video_id}/share", response_model=ShareResponse)
async def share_video(
    video_id: str = Path(..., min_length=1, description="YouTube video ID"),
    session: BrowserSession = Depends(get_browser_session),
) -> ShareResponse:
    """Get the share text and link for a video."""
    video = await _fetch_video(session, video_id)
    return ShareResponse(data=session.player.share_data(video))


@router.post("/videos/{video_id}/download", response_model=DownloadResponse)
async def download_video(
    video_id: str = Path(..., min_length=1, description="YouTube video ID"),
    quality: str = Query(..., description="One of the qualities offered for the video"),
    session: BrowserSession = Depends(get_browser_session),
) -> DownloadResponse:
    """Request a download of a video in one of its offered qualities."""
    video = await _fetch_video(session, video_id)
    try:
        request = session.player.download(video, quality)
    except ValueError as e:
        raise BadRequestError(str(e), details={"quality": quality}) from e
    return DownloadResponse(data=request)
