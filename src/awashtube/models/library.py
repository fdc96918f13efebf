"""
Library models for locally persisted video lists.

The library is four lists of opaque video IDs plus the last selected tab.
Serialized keys use the camelCase names the stored file has always used
(``watchLater``, ``activeTab``).
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .enums import LibraryList, LibraryTab


class LibrarySnapshot(BaseModel):
    """Point-in-time copy of the library state."""

    model_config = ConfigDict(populate_by_name=True)

    favorites: List[str] = Field(default_factory=list)
    history: List[str] = Field(default_factory=list)
    playlist: List[str] = Field(default_factory=list)
    watch_later: List[str] = Field(default_factory=list, alias="watchLater")
    active_tab: LibraryTab = Field(default=LibraryTab.ALL, alias="activeTab")

    def get_list(self, library_list: LibraryList) -> List[str]:
        """Return the IDs held in ``library_list``."""
        return list(getattr(self, _FIELD_NAMES[library_list]))


_FIELD_NAMES: dict[LibraryList, str] = {
    LibraryList.FAVORITES: "favorites",
    LibraryList.HISTORY: "history",
    LibraryList.PLAYLIST: "playlist",
    LibraryList.WATCH_LATER: "watch_later",
}


class LibraryStats(BaseModel):
    """Number of entries in each library list."""

    favorites: int = Field(default=0, ge=0)
    history: int = Field(default=0, ge=0)
    playlist: int = Field(default=0, ge=0)
    watch_later: int = Field(default=0, ge=0)

    @property
    def has_data(self) -> bool:
        """True when any list has at least one entry."""
        return any((self.favorites, self.history, self.playlist, self.watch_later))

    @property
    def total(self) -> int:
        """Sum of all list lengths."""
        return self.favorites + self.history + self.playlist + self.watch_later
