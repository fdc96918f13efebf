"""
Configuration management module for awashtube.

Handles application settings, environment variables and storage locations.
"""

from __future__ import annotations

__all__: list[str] = []
