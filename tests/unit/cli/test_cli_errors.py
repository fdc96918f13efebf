"""
Tests for CLI error formatting and exit code mapping.
"""

from __future__ import annotations

import pytest
import typer

from awashtube.cli.errors import (
    ErrorCategory,
    exit_for_exception,
    exit_invalid_argument,
    format_error,
)
from awashtube.exceptions import (
    AwashTubeError,
    LibraryStorageError,
    NetworkError,
    VideoNotFoundError,
    YouTubeAPIError,
)


class TestFormatError:
    """Test error message formatting."""

    def test_without_hint(self) -> None:
        assert format_error(ErrorCategory.NOT_FOUND, "Video 'abc' not found") == (
            "Error: Not Found: Video 'abc' not found"
        )

    def test_with_hint(self) -> None:
        """Test the hint is indented on its own line."""
        message = format_error(ErrorCategory.VALIDATION, "Bad tab", hint="Use all")

        assert message == "Error: Validation: Bad tab\n   Hint: Use all"


class TestExitForException:
    """Test mapping exceptions to exit codes."""

    @pytest.mark.parametrize(
        "error,code",
        [
            (VideoNotFoundError("abc"), 4),
            (YouTubeAPIError.from_status(403, "quotaExceeded"), 3),
            (NetworkError("timed out"), 3),
            (LibraryStorageError("disk full"), 1),
            (AwashTubeError("boom"), 1),
        ],
    )
    def test_exit_codes(self, error: AwashTubeError, code: int) -> None:
        with pytest.raises(typer.Exit) as exc_info:
            exit_for_exception(error)

        assert exc_info.value.exit_code == code

    def test_invalid_argument(self) -> None:
        with pytest.raises(typer.Exit) as exc_info:
            exit_invalid_argument("bad value")

        assert exc_info.value.exit_code == 2
