"""
Factory definitions for video models.

Provides factory-boy factories for creating display-ready ``Video`` records
and pages of them with realistic, distinct test data.
"""

from __future__ import annotations

import factory

from awashtube.models.video import DEFAULT_QUALITIES, Video, VideoPage


class VideoFactory(factory.Factory):
    """Factory for Video models with unique 11-character IDs."""

    class Meta:
        model = Video

    id = factory.Sequence(lambda n: f"vid{n:08d}")
    title = factory.Sequence(lambda n: f"Lesson {n}: Ge'ez Hymns")
    description = factory.LazyFunction(
        lambda: "Recorded at the monastery school. Chant and commentary."
    )
    thumbnail = factory.LazyAttribute(lambda o: f"https://i.ytimg.com/vi/{o.id}/hqdefault.jpg")
    published_at = factory.LazyFunction(lambda: "3/14/2024")
    channel_title = factory.LazyFunction(lambda: "Awash Orthodox Teachings")
    duration = factory.LazyFunction(lambda: "12:34")
    view_count = factory.LazyFunction(lambda: "1,234")
    like_count = factory.LazyFunction(lambda: "56")
    qualities = factory.LazyFunction(lambda: list(DEFAULT_QUALITIES))


class VideoPageFactory(factory.Factory):
    """Factory for VideoPage models holding three videos."""

    class Meta:
        model = VideoPage

    videos = factory.LazyFunction(lambda: VideoFactory.build_batch(3))
    next_page_token = factory.LazyFunction(lambda: "CAoQAA")
    prev_page_token = None
    total_results = factory.LazyFunction(lambda: 42)
