"""
Error display helpers for CLI commands.

Maps domain exceptions to rich error output and CLI exit codes.
"""

from __future__ import annotations

from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.panel import Panel

from awashtube.exceptions import (
    EXIT_CODE_GENERAL_ERROR,
    EXIT_CODE_INVALID_ARGS,
    EXIT_CODE_NOT_FOUND,
    EXIT_CODE_YOUTUBE_API_FAILED,
    AwashTubeError,
    LibraryStorageError,
    NetworkError,
    VideoNotFoundError,
    YouTubeAPIError,
)

# Module-level console for CLI error display
console = Console()


class ErrorCategory:
    """Standard error categories for CLI commands."""

    NOT_FOUND = "Not Found"
    VALIDATION = "Validation"
    YOUTUBE_API = "YouTube API"
    NETWORK = "Network"
    STORAGE = "Storage"


def format_error(
    category: str,
    message: str,
    hint: Optional[str] = None,
) -> str:
    """
    Format an error message as ``Error: <category>: <message>``.

    Parameters
    ----------
    category : str
        Error category from ErrorCategory.
    message : str
        Human-readable error description.
    hint : Optional[str]
        Actionable suggestion for resolving the error.

    Returns
    -------
    str
        Formatted error message string.

    Examples
    --------
    >>> format_error("Not Found", "Video 'abc' not found")
    "Error: Not Found: Video 'abc' not found"
    """
    lines = [f"Error: {category}: {message}"]
    if hint is not None:
        lines.append(f"   Hint: {hint}")
    return "\n".join(lines)


def display_error_panel(
    category: str,
    message: str,
    hint: Optional[str] = None,
    title: str = "Error",
) -> None:
    """Display a formatted error in a red rich panel."""
    console.print(
        Panel(
            f"[red]{format_error(category, message, hint)}[/red]",
            title=title,
            border_style="red",
        )
    )


def exit_with_error(
    category: str, message: str, code: int, hint: Optional[str] = None
) -> NoReturn:
    """Show an error panel and stop the command with ``code``."""
    display_error_panel(category, message, hint)
    raise typer.Exit(code=code)


def exit_for_exception(error: AwashTubeError) -> NoReturn:
    """
    Report a domain exception and exit with its mapped exit code.

    Parameters
    ----------
    error : AwashTubeError
        The exception raised by a service.

    Raises
    ------
    typer.Exit
        Always; 4 for missing videos, 3 for YouTube and network failures,
        1 otherwise.
    """
    if isinstance(error, VideoNotFoundError):
        exit_with_error(
            ErrorCategory.NOT_FOUND,
            error.message,
            EXIT_CODE_NOT_FOUND,
            hint="Use 'awashtube videos list' to see the loaded videos.",
        )
    if isinstance(error, YouTubeAPIError):
        hint = f"Reason: {error.error_reason}" if error.error_reason else None
        exit_with_error(
            ErrorCategory.YOUTUBE_API, error.message, EXIT_CODE_YOUTUBE_API_FAILED, hint
        )
    if isinstance(error, NetworkError):
        exit_with_error(
            ErrorCategory.NETWORK, error.message, EXIT_CODE_YOUTUBE_API_FAILED
        )
    if isinstance(error, LibraryStorageError):
        exit_with_error(ErrorCategory.STORAGE, error.message, EXIT_CODE_GENERAL_ERROR)
    exit_with_error("Unexpected", error.message, EXIT_CODE_GENERAL_ERROR)


def exit_invalid_argument(message: str, hint: Optional[str] = None) -> NoReturn:
    """Report an invalid argument and exit with code 2."""
    exit_with_error(ErrorCategory.VALIDATION, message, EXIT_CODE_INVALID_ARGS, hint)
