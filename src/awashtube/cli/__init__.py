"""
CLI interface module for awashtube.

Provides Typer-based command-line interface for browsing channel videos
and managing the local library.
"""

from __future__ import annotations

__all__: list[str] = []
