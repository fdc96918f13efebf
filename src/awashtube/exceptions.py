"""
Custom exceptions for the awashtube application.

This module defines domain-specific exceptions for error handling
throughout the application, including YouTube API errors, network
failures, library persistence failures and API-layer errors.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from awashtube.api.schemas.responses import ErrorCode


class AwashTubeError(Exception):
    """Base exception for all awashtube errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize AwashTubeError.

        Parameters
        ----------
        message : str
            Human-readable error message.
        """
        self.message = message
        super().__init__(message)


class YouTubeAPIError(AwashTubeError):
    """
    Exception raised for YouTube API errors.

    This exception wraps non-successful responses from the YouTube Data
    API, and responses whose body does not have the expected shape.

    Attributes
    ----------
    message : str
        Human-readable error message.
    status_code : int | None
        HTTP status code returned by the API.
    error_reason : str | None
        The error reason from the API response (e.g., "quotaExceeded").

    Examples
    --------
    >>> try:
    ...     page = await youtube_service.fetch_channel_videos()
    ... except YouTubeAPIError as e:
    ...     print(f"Request failed with {e.status_code}: {e.error_reason}")
    """

    def __init__(
        self,
        message: str = "YouTube API error occurred",
        status_code: int | None = None,
        error_reason: str | None = None,
    ) -> None:
        """
        Initialize YouTubeAPIError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message (default: "YouTube API error occurred").
        status_code : int | None, optional
            HTTP status code returned by the API (default: None).
        error_reason : str | None, optional
            The error reason from the API response (default: None).
        """
        self.status_code: int | None = status_code
        self.error_reason: str | None = error_reason
        super().__init__(message)

    @classmethod
    def from_status(
        cls, status_code: int, error_reason: str | None = None
    ) -> YouTubeAPIError:
        """Build the error for a non-successful HTTP status."""
        return cls(
            message=f"YouTube API error: {status_code}",
            status_code=status_code,
            error_reason=error_reason,
        )


class NetworkError(AwashTubeError):
    """
    Exception raised for network-related failures.

    Wraps transport errors such as connection timeouts and DNS failures.
    No retry is attempted; the error propagates to the caller.

    Attributes
    ----------
    message : str
        Human-readable error message.
    original_error : Exception | None
        The original exception that caused this error.
    """

    def __init__(
        self,
        message: str = "Network error occurred",
        original_error: Exception | None = None,
    ) -> None:
        """
        Initialize NetworkError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message (default: "Network error occurred").
        original_error : Exception | None, optional
            The original exception that caused this error (default: None).
        """
        self.original_error = original_error
        super().__init__(message)


class VideoNotFoundError(AwashTubeError):
    """
    Exception raised when a video cannot be found.

    Raised when the YouTube API returns no item for a video ID, or when a
    video ID is not among the videos currently loaded in a session.

    Attributes
    ----------
    video_id : str
        The video ID that was looked up.
    """

    def __init__(self, video_id: str, message: str | None = None) -> None:
        """
        Initialize VideoNotFoundError.

        Parameters
        ----------
        video_id : str
            The video ID that was looked up.
        message : str | None, optional
            Override for the default message (default: None).
        """
        self.video_id = video_id
        super().__init__(message or f"Video '{video_id}' not found")


class LibraryStorageError(AwashTubeError):
    """
    Exception raised when the library cannot be persisted.

    Attributes
    ----------
    message : str
        Human-readable error message.
    path : Path | None
        The library file that could not be written.
    original_error : Exception | None
        The original exception that caused this error.
    """

    def __init__(
        self,
        message: str = "Library storage error",
        path: Path | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """
        Initialize LibraryStorageError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message (default: "Library storage error").
        path : Path | None, optional
            The library file that could not be written (default: None).
        original_error : Exception | None, optional
            The original exception that caused this error (default: None).
        """
        self.path = path
        self.original_error = original_error
        super().__init__(message)


class APIError(AwashTubeError):
    """Base exception for API layer errors.

    Provides a standardized way to return HTTP errors from the API layer
    with machine-readable error codes and detailed context.

    Attributes
    ----------
    status_code : int
        HTTP status code for the error response (default: 500).
    error_code : ErrorCode
        Machine-readable error code for API consumers.
    message : str
        Human-readable error message.
    details : dict[str, Any] | None
        Additional error context (e.g., resource_type, identifier).
    """

    status_code: int = 500
    _error_code_value: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize APIError.

        Parameters
        ----------
        message : str
            Human-readable error message.
        details : dict[str, Any] | None, optional
            Additional error context (default: None).
        """
        self.details = details
        super().__init__(message)

    @property
    def error_code(self) -> ErrorCode:
        """Get the error code as an ErrorCode enum."""
        from awashtube.api.schemas.responses import ErrorCode

        return ErrorCode(self._error_code_value)


class NotFoundError(APIError):
    """Resource not found (404).

    Examples
    --------
    >>> raise NotFoundError(resource_type="Video", identifier="dQw4w9WgXcQ")
    """

    status_code: int = 404
    _error_code_value: str = "NOT_FOUND"

    def __init__(
        self,
        resource_type: str,
        identifier: str,
        hint: str | None = None,
    ) -> None:
        """
        Initialize NotFoundError.

        Parameters
        ----------
        resource_type : str
            The type of resource that was not found (e.g., "Video").
        identifier : str
            The identifier used to look up the resource.
        hint : str | None, optional
            Additional hint for the user (default: None).
        """
        self.resource_type = resource_type
        self.identifier = identifier
        message = f"{resource_type} '{identifier}' not found"
        if hint:
            message += f". {hint}"
        super().__init__(
            message=message,
            details={"resource_type": resource_type, "identifier": identifier},
        )


class BadRequestError(APIError):
    """Invalid request parameters (400)."""

    status_code: int = 400
    _error_code_value: str = "BAD_REQUEST"


# Exit codes for CLI integration
EXIT_CODE_SUCCESS = 0
EXIT_CODE_GENERAL_ERROR = 1
EXIT_CODE_INVALID_ARGS = 2
EXIT_CODE_YOUTUBE_API_FAILED = 3
EXIT_CODE_NOT_FOUND = 4
EXIT_CODE_INTERRUPTED = 130  # Standard Unix signal interrupt exit code
