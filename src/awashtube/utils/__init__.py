"""Utility modules for awashtube."""

from awashtube.utils.formatting import (
    format_duration,
    format_number,
    format_published_date,
    format_time,
)

__all__ = [
    "format_duration",
    "format_number",
    "format_published_date",
    "format_time",
]
