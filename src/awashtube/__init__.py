"""
awashtube - Channel video browser for the YouTube Data API.

A CLI-first application that lists the videos of a single YouTube channel,
filters them locally, and keeps favorites, history, playlist and
watch-later lists on disk.
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "awashtube"
__email__ = "noreply@awashtube.dev"
__license__ = "AGPL-3.0-or-later"

__all__ = ["__version__", "__author__", "__email__", "__license__"]
