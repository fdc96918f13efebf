"""
Browser session: the view/controller state of the channel browser.

Ties together the loaded page of videos, the search box, the library lists
and the player. Each method is a direct, synchronous state transition except
``load_videos``, which awaits the YouTube service.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from awashtube.exceptions import AwashTubeError, VideoNotFoundError
from awashtube.models.enums import PlayerAction
from awashtube.models.video import DownloadRequest, ShareData, Video, VideoPage
from awashtube.services.library_service import LibraryService
from awashtube.services.player import SEEK_STEP_SECONDS, VOLUME_STEP, PlayerController
from awashtube.services.youtube_service import YouTubeService

logger = logging.getLogger(__name__)


class BrowserSession:
    """
    State of one browsing session.

    Parameters
    ----------
    youtube_service : YouTubeService
        Source of channel videos.
    library : LibraryService
        Favorites, history, playlist and watch-later lists.
    player : PlayerController
        Controls for the open video.
    page_size : int
        Number of videos requested per page.
    """

    def __init__(
        self,
        youtube_service: YouTubeService,
        library: LibraryService,
        player: PlayerController,
        page_size: int = 10,
    ) -> None:
        self.youtube_service = youtube_service
        self.library = library
        self.player = player
        self.page_size = page_size

        self.videos: List[Video] = []
        self.current_video: Optional[Video] = None
        self.search_query = ""
        self.search_focused = False
        self.loading = False
        self.next_page_token: Optional[str] = None
        self.prev_page_token: Optional[str] = None
        self.total_results: Optional[int] = None

    # -------------------------------------------------------------------------
    # Loading and filtering
    # -------------------------------------------------------------------------

    async def load_videos(self, page_token: str = "") -> Optional[VideoPage]:
        """
        Load a page of channel videos into the session.

        Failures are logged and leave the previously loaded videos in place.

        Returns
        -------
        VideoPage | None
            The loaded page, or None if loading failed.
        """
        self.loading = True
        try:
            page = await self.youtube_service.fetch_channel_videos(
                max_results=self.page_size, page_token=page_token
            )
        except AwashTubeError as e:
            logger.error("Failed to load videos: %s", e)
            return None
        finally:
            self.loading = False

        self.videos = list(page.videos)
        self.next_page_token = page.next_page_token
        self.prev_page_token = page.prev_page_token
        self.total_results = page.total_results
        return page

    def set_search_query(self, query: str) -> None:
        self.search_query = query
        self.search_focused = False

    def visible_videos(self) -> List[Video]:
        """Loaded videos matching the search query within the active tab."""
        return self.library.filter_videos(self.videos, self.search_query)

    def find_video(self, video_id: str) -> Optional[Video]:
        return next((video for video in self.videos if video.id == video_id), None)

    # -------------------------------------------------------------------------
    # Playback
    # -------------------------------------------------------------------------

    def play_video(self, video: Video) -> str:
        """
        Open ``video`` in the player and record it in the history.

        Returns
        -------
        str
            The embedded player URL.
        """
        self.current_video = video
        self.player.reset()
        self.library.record_history(video.id)
        return self.player.embed_url(video.id)

    def play_video_by_id(self, video_id: str) -> str:
        """Open a loaded video by ID; raises ``VideoNotFoundError`` if it is not loaded."""
        video = self.find_video(video_id)
        if video is None:
            raise VideoNotFoundError(video_id)
        return self.play_video(video)

    def close_video(self) -> None:
        self.current_video = None
        self.player.set_fullscreen(False)

    def handle_video_end(self) -> Optional[Video]:
        """
        Advance to the next playlist entry when the current video ends.

        Returns
        -------
        Video | None
            The video now playing, or None if the player was closed.
        """
        if self.current_video is None:
            return None

        next_video = self.library.next_in_playlist(self.current_video.id, self.videos)
        if next_video is None:
            self.close_video()
            return None

        self.play_video(next_video)
        return next_video

    def handle_key(self, key: str, ctrl: bool = False) -> Optional[PlayerAction]:
        """
        Apply a keyboard shortcut.

        Returns
        -------
        PlayerAction | None
            The action that was applied, or None if the key is not bound.
        """
        action = self.player.action_for_key(
            key, ctrl=ctrl, has_video=self.current_video is not None
        )
        if action is None:
            return None

        if action is PlayerAction.CLOSE:
            self.close_video()
        elif action is PlayerAction.FOCUS_SEARCH:
            self.search_focused = True
        elif action is PlayerAction.TOGGLE_PLAY:
            self.player.toggle_play()
        elif action is PlayerAction.SEEK_FORWARD:
            self.player.seek(SEEK_STEP_SECONDS)
        elif action is PlayerAction.SEEK_BACKWARD:
            self.player.seek(-SEEK_STEP_SECONDS)
        elif action is PlayerAction.VOLUME_UP:
            self.player.adjust_volume(VOLUME_STEP)
        elif action is PlayerAction.VOLUME_DOWN:
            self.player.adjust_volume(-VOLUME_STEP)
        elif action is PlayerAction.TOGGLE_MUTE:
            self.player.toggle_mute()
        elif action is PlayerAction.TOGGLE_FULLSCREEN:
            self.player.toggle_fullscreen()
        return action

    # -------------------------------------------------------------------------
    # Actions on the open video
    # -------------------------------------------------------------------------

    def share_current(self) -> Optional[ShareData]:
        if self.current_video is None:
            return None
        return self.player.share_data(self.current_video)

    def download_current(self, quality: str) -> Optional[DownloadRequest]:
        if self.current_video is None:
            return None
        return self.player.download(self.current_video, quality)

    def clear_all_data(self, confirmed: bool) -> bool:
        """
        Clear the library once the user has confirmed.

        Returns
        -------
        bool
            True if the library was cleared.
        """
        if not confirmed:
            return False
        self.library.clear_all()
        return True
