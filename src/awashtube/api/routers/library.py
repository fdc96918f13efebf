"""Library endpoints: favorites, history, playlist, watch later and the selected tab."""

from __future__ import annotations

from fastapi import APIRouter, Body, Depends, Path

from awashtube.api.deps import get_library_service
from awashtube.api.schemas.library import (
    LibraryResponse,
    LibraryState,
    TabUpdate,
    ToggleResponse,
    ToggleResult,
)
from awashtube.models.enums import ToggleableList
from awashtube.services.library_service import LibraryService

router = APIRouter()


def _state(library: LibraryService) -> LibraryState:
    return LibraryState(
        favorites=library.favorites,
        history=library.history,
        playlist=library.playlist,
        watch_later=library.watch_later,
        active_tab=library.active_tab,
        stats=library.stats(),
    )


@router.get("/library", response_model=LibraryResponse)
async def get_library(
    library: LibraryService = Depends(get_library_service),
) -> LibraryResponse:
    """Get every library list and the selected tab."""
    return LibraryResponse(data=_state(library))


@router.post("/library/{library_list}/{video_id}", response_model=ToggleResponse)
async def toggle_video(
    library_list: ToggleableList = Path(
        ..., description="favorites, playlist or watchLater"
    ),
    video_id: str = Path(..., min_length=1, description="YouTube video ID"),
    library: LibraryService = Depends(get_library_service),
) -> ToggleResponse:
    """Add a video to a list, or remove it if already there."""
    present = library.toggle(library_list.library_list, video_id)
    return ToggleResponse(
        data=ToggleResult(
            library_list=library_list.library_list,
            video_id=video_id,
            present=present,
        )
    )


@router.put("/library/tab", response_model=LibraryResponse)
async def set_tab(
    update: TabUpdate = Body(...),
    library: LibraryService = Depends(get_library_service),
) -> LibraryResponse:
    """Select the tab used when listing videos."""
    library.set_active_tab(update.tab)
    return LibraryResponse(data=_state(library))


@router.delete("/library", response_model=LibraryResponse)
async def clear_library(
    library: LibraryService = Depends(get_library_service),
) -> LibraryResponse:
    """Clear every list and return to the All Videos tab."""
    library.clear_all()
    return LibraryResponse(data=_state(library))
