"""Library API schemas."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from awashtube.api.schemas.responses import ApiResponse
from awashtube.models.enums import LibraryList, LibraryTab
from awashtube.models.library import LibraryStats


class LibraryState(BaseModel):
    """Every library list, the selected tab and the list sizes."""

    favorites: List[str] = Field(default_factory=list)
    history: List[str] = Field(default_factory=list)
    playlist: List[str] = Field(default_factory=list)
    watch_later: List[str] = Field(default_factory=list)
    active_tab: LibraryTab = LibraryTab.ALL
    stats: LibraryStats = Field(default_factory=LibraryStats)


class ToggleResult(BaseModel):
    """Membership of a video after toggling it in a list."""

    library_list: LibraryList
    video_id: str
    present: bool


class TabUpdate(BaseModel):
    """Request body selecting the active tab."""

    tab: LibraryTab


class LibraryResponse(ApiResponse[LibraryState]):
    """Response for the library endpoints."""

    pass


class ToggleResponse(ApiResponse[ToggleResult]):
    """Response for the toggle endpoint."""

    pass
