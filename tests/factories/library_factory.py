"""Factory definitions for library snapshots."""

from __future__ import annotations

import factory

from awashtube.models.enums import LibraryTab
from awashtube.models.library import LibrarySnapshot


class LibrarySnapshotFactory(factory.Factory):
    """Factory for LibrarySnapshot models with one entry in every list."""

    class Meta:
        model = LibrarySnapshot

    favorites = factory.LazyFunction(lambda: ["vid00000001"])
    history = factory.LazyFunction(lambda: ["vid00000001", "vid00000002"])
    playlist = factory.LazyFunction(lambda: ["vid00000003"])
    watch_later = factory.LazyFunction(lambda: ["vid00000004"])
    active_tab = LibraryTab.ALL
