"""
Validated string types for YouTube identifiers.

``ChannelId`` and ``VideoId`` are plain ``str`` at runtime; inside pydantic
models they reject values of the wrong length or alphabet.
"""

from __future__ import annotations

import re
from typing import Annotated

from pydantic import BeforeValidator, Field

CHANNEL_ID_LENGTH = 24
VIDEO_ID_LENGTH = 11

# YouTube IDs use the URL-safe base64 alphabet
_ID_ALPHABET = re.compile(r"^[A-Za-z0-9_-]+$")


def _check_alphabet(kind: str, v: str) -> None:
    if not _ID_ALPHABET.match(v):
        raise ValueError(f"{kind} contains invalid characters: {v}")


def validate_channel_id(v: str) -> str:
    """Check a channel ID: 24 URL-safe characters starting with ``UC``."""
    if not isinstance(v, str):
        raise TypeError("ChannelId must be a string")
    if len(v) != CHANNEL_ID_LENGTH:
        raise ValueError(
            f"ChannelId must be exactly {CHANNEL_ID_LENGTH} characters long, got {len(v)}: {v}"
        )
    if not v.startswith("UC"):
        raise ValueError(f'ChannelId must start with "UC", got: {v}')
    _check_alphabet("ChannelId", v)
    return v


def validate_video_id(v: str) -> str:
    """Check a video ID (11 URL-safe characters), ignoring surrounding whitespace."""
    if not isinstance(v, str):
        raise TypeError("VideoId must be a string")
    v = v.strip()
    if len(v) != VIDEO_ID_LENGTH:
        raise ValueError(
            f"VideoId must be exactly {VIDEO_ID_LENGTH} characters long, got {len(v)}: {v}"
        )
    _check_alphabet("VideoId", v)
    return v


ChannelId = Annotated[
    str,
    BeforeValidator(validate_channel_id),
    Field(description="YouTube channel ID (UC + 22 characters)"),
]

VideoId = Annotated[
    str,
    BeforeValidator(validate_video_id),
    Field(description="YouTube video ID (11 characters)"),
]
