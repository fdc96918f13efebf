"""
Embedded player state and controls.

The video itself plays in YouTube's embedded player; this module keeps the
control state around it (play/pause, volume, seek position, speed, quality,
fullscreen), maps keyboard shortcuts to actions, and builds the embed, share
and download payloads for a video.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from pydantic import BaseModel, Field

from awashtube.models.enums import PlayerAction
from awashtube.models.video import DownloadRequest, ShareData, Video
from awashtube.utils.formatting import format_time

logger = logging.getLogger(__name__)

PLAYBACK_RATES: tuple[float, ...] = (0.5, 0.75, 1.0, 1.25, 1.5, 2.0)
SEEK_STEP_SECONDS = 5.0
VOLUME_STEP = 10
DEFAULT_VOLUME = 80
AUTO_QUALITY = "auto"

DEFAULT_EMBED_BASE_URL = "https://www.youtube.com/embed"
DEFAULT_WATCH_BASE_URL = "https://youtube.com/watch"
EMBED_QUERY = "autoplay=1&modestbranding=1&rel=0"


class PlayerState(BaseModel):
    """Control state of the player."""

    is_playing: bool = True
    is_muted: bool = False
    volume: int = Field(default=DEFAULT_VOLUME, ge=0, le=100)
    current_time: float = Field(default=0.0, ge=0)
    duration: float = Field(default=0.0, ge=0)
    playback_rate: float = 1.0
    selected_quality: str = AUTO_QUALITY
    is_fullscreen: bool = False


class PlayerController:
    """
    Player controls for the currently open video.

    Parameters
    ----------
    embed_base_url : str
        Base of the embedded player URL.
    watch_base_url : str
        Base of the public watch URL used for sharing.
    """

    def __init__(
        self,
        embed_base_url: str = DEFAULT_EMBED_BASE_URL,
        watch_base_url: str = DEFAULT_WATCH_BASE_URL,
    ) -> None:
        self.embed_base_url = embed_base_url.rstrip("/")
        self.watch_base_url = watch_base_url.rstrip("/")
        self.state = PlayerState()

    def reset(self, duration: float = 0.0) -> None:
        """Prepare for a newly opened video: playing from the start."""
        self.state.is_playing = True
        self.state.current_time = 0.0
        self.state.duration = max(0.0, duration)

    # -------------------------------------------------------------------------
    # Controls
    # -------------------------------------------------------------------------

    def toggle_play(self) -> bool:
        self.state.is_playing = not self.state.is_playing
        return self.state.is_playing

    def toggle_mute(self) -> bool:
        self.state.is_muted = not self.state.is_muted
        return self.state.is_muted

    def toggle_fullscreen(self) -> bool:
        self.state.is_fullscreen = not self.state.is_fullscreen
        return self.state.is_fullscreen

    def set_fullscreen(self, enabled: bool) -> None:
        self.state.is_fullscreen = enabled

    def seek(self, delta: float) -> float:
        """
        Move the play position by ``delta`` seconds.

        The new position is clamped to ``[0, duration]``.

        Returns
        -------
        float
            The new position.
        """
        new_time = max(0.0, min(self.state.current_time + delta, self.state.duration))
        self.state.current_time = new_time
        logger.debug("Seeking to %s seconds", new_time)
        return new_time

    def seek_to_fraction(self, fraction: float) -> float:
        """Jump to ``fraction`` (0..1) of the duration, as a progress-bar click does."""
        target = fraction * self.state.duration
        return self.seek(target - self.state.current_time)

    def adjust_volume(self, delta: int) -> int:
        """
        Change the volume by ``delta``, clamped to 0..100.

        Reaching 0 mutes the player; any other level unmutes it.

        Returns
        -------
        int
            The new volume.
        """
        new_volume = max(0, min(self.state.volume + delta, 100))
        self.state.volume = new_volume
        if new_volume == 0:
            self.state.is_muted = True
        elif self.state.is_muted:
            self.state.is_muted = False
        return new_volume

    def set_volume(self, volume: int) -> int:
        """Set the volume directly (slider input); 0 mutes, anything else unmutes."""
        self.state.volume = max(0, min(int(volume), 100))
        self.state.is_muted = self.state.volume == 0
        return self.state.volume

    def set_playback_rate(self, rate: float) -> float:
        """Select a playback speed from ``PLAYBACK_RATES``."""
        if rate not in PLAYBACK_RATES:
            raise ValueError(
                f"Unsupported playback rate {rate}; choose one of "
                f"{', '.join(str(r) for r in PLAYBACK_RATES)}"
            )
        self.state.playback_rate = float(rate)
        return self.state.playback_rate

    def select_quality(self, quality: str, available: Sequence[str]) -> str:
        """Select a quality offered for the current video, or ``auto``."""
        if quality != AUTO_QUALITY and quality not in available:
            raise ValueError(
                f"Quality {quality!r} is not available; choose one of "
                f"{', '.join([AUTO_QUALITY, *available])}"
            )
        self.state.selected_quality = quality
        return quality

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------

    def progress_percent(self) -> float:
        """Play position as a percentage of the duration (0 when unknown)."""
        if self.state.duration <= 0:
            return 0.0
        return self.state.current_time / self.state.duration * 100

    def clock(self) -> str:
        """Position and duration as ``M:SS / M:SS``."""
        return f"{format_time(self.state.current_time)} / {format_time(self.state.duration)}"

    # -------------------------------------------------------------------------
    # Keyboard shortcuts
    # -------------------------------------------------------------------------

    @staticmethod
    def action_for_key(
        key: str, ctrl: bool = False, has_video: bool = True
    ) -> Optional[PlayerAction]:
        """
        Map a key press to a player action.

        Escape and Ctrl+K always apply; the remaining shortcuts only apply
        while a video is open.

        Parameters
        ----------
        key : str
            Key name as reported by the UI (``"Escape"``, ``"ArrowUp"``, ``" "``...).
        ctrl : bool
            Whether the Control modifier is held.
        has_video : bool
            Whether a video is currently open.

        Returns
        -------
        PlayerAction | None
            The action to perform, or None if the key is not bound.
        """
        if key == "Escape":
            return PlayerAction.CLOSE
        if ctrl and key == "k":
            return PlayerAction.FOCUS_SEARCH
        if not has_video:
            return None
        return _VIDEO_SHORTCUTS.get(key)

    # -------------------------------------------------------------------------
    # URLs and payloads
    # -------------------------------------------------------------------------

    def embed_url(self, video_id: str) -> str:
        """URL of the embedded player for ``video_id``, autoplaying."""
        return f"{self.embed_base_url}/{video_id}?{EMBED_QUERY}"

    def watch_url(self, video_id: str) -> str:
        """Public watch URL for ``video_id``."""
        return f"{self.watch_base_url}?v={video_id}"

    def share_data(self, video: Video) -> ShareData:
        """Build the share payload for ``video``."""
        return ShareData(
            title=video.title,
            text=f"Check out this video: {video.title}",
            url=self.watch_url(video.id),
        )

    def download(self, video: Video, quality: str) -> DownloadRequest:
        """
        Acknowledge a download request.

        Downloads are not performed; the request only yields the message
        shown to the user.

        Raises
        ------
        ValueError
            If ``quality`` is not offered for ``video``.
        """
        if quality not in video.qualities:
            raise ValueError(
                f"Quality {quality!r} is not available for {video.id}; choose one of "
                f"{', '.join(video.qualities)}"
            )
        message = f"Preparing download of {video.title} in {quality} quality..."
        logger.info(message)
        return DownloadRequest(
            video_id=video.id, title=video.title, quality=quality, message=message
        )


_VIDEO_SHORTCUTS: dict[str, PlayerAction] = {
    " ": PlayerAction.TOGGLE_PLAY,
    "ArrowRight": PlayerAction.SEEK_FORWARD,
    "ArrowLeft": PlayerAction.SEEK_BACKWARD,
    "ArrowUp": PlayerAction.VOLUME_UP,
    "ArrowDown": PlayerAction.VOLUME_DOWN,
    "m": PlayerAction.TOGGLE_MUTE,
    "f": PlayerAction.TOGGLE_FULLSCREEN,
}
