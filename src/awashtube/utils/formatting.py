"""
Display formatting helpers.

Turns raw YouTube API values (ISO 8601 durations, numeric strings,
timestamps) into the short strings shown next to each video.
"""

from __future__ import annotations

import logging
import math
import re
from datetime import datetime, timezone
from typing import Optional, Union

logger = logging.getLogger(__name__)

_DURATION_PATTERN = re.compile(r"PT(\d+H)?(\d+M)?(\d+S)?")


def _component(group: Optional[str]) -> int:
    """Numeric value of a matched ``12H``/``3M``/``4S`` duration component."""
    if not group:
        return 0
    return int(group[:-1])


def format_duration(duration: Optional[str]) -> str:
    """
    Format an ISO 8601 duration as a clock string.

    Parameters
    ----------
    duration : Optional[str]
        Duration as returned by the YouTube API (e.g., "PT1H2M3S").

    Returns
    -------
    str
        ``H:MM:SS`` when the duration has hours, otherwise ``M:SS``.
        Durations without a time part (e.g., "P1D") format as "0:00".

    Examples
    --------
    >>> format_duration("PT1H2M3S")
    '1:02:03'
    >>> format_duration("PT4M5S")
    '4:05'
    >>> format_duration("PT45S")
    '0:45'
    """
    if not duration:
        return "0:00"

    match = _DURATION_PATTERN.search(duration)
    if not match:
        return "0:00"

    hours = _component(match.group(1))
    minutes = _component(match.group(2))
    seconds = _component(match.group(3))

    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def format_number(value: Union[int, str, None]) -> str:
    """
    Format a count with thousands separators.

    Parameters
    ----------
    value : Union[int, str, None]
        Count as an int or numeric string.

    Returns
    -------
    str
        The count with comma separators (e.g., "1,234,567"), or an empty
        string when the count is missing or not numeric.
    """
    if value is None or value == "":
        return ""
    try:
        number = int(value)
    except (TypeError, ValueError):
        logger.debug("Cannot format non-numeric count %r", value)
        return ""
    return f"{number:,}"


def format_published_date(published_at: Optional[datetime]) -> str:
    """Format a publish timestamp as ``M/D/YYYY`` (UTC calendar date)."""
    if published_at is None:
        return ""
    if published_at.tzinfo is not None:
        published_at = published_at.astimezone(timezone.utc)
    return f"{published_at.month}/{published_at.day}/{published_at.year}"


def format_time(seconds: float) -> str:
    """Format a player position in seconds as ``M:SS``."""
    if seconds < 0 or math.isnan(seconds):
        seconds = 0
    minutes = int(seconds // 60)
    secs = int(seconds % 60)
    return f"{minutes}:{secs:02d}"
