"""Centralized exception handlers for FastAPI with RFC 7807 compliance.

Converts domain exceptions to RFC 7807 Problem Details so every error
response from the API has the same structure.

RFC 7807 Reference: https://tools.ietf.org/html/rfc7807
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from awashtube.api.schemas.responses import (
    ERROR_TITLES,
    ErrorCode,
    FieldError,
    ProblemDetail,
    ProblemJSONResponse,
    ValidationProblemDetail,
    get_error_type_uri,
)
from awashtube.exceptions import (
    APIError,
    LibraryStorageError,
    NetworkError,
    VideoNotFoundError,
    YouTubeAPIError,
)

logger = logging.getLogger(__name__)


def _problem_response(
    code: ErrorCode,
    status: int,
    detail: str,
    instance: str,
) -> ProblemJSONResponse:
    """Build an RFC 7807 response for ``code``."""
    problem = ProblemDetail(
        type=get_error_type_uri(code),
        title=ERROR_TITLES.get(code, "Error"),
        status=status,
        detail=detail,
        instance=instance,
        code=code.value,
    )
    return ProblemJSONResponse(content=problem.model_dump(), status_code=status)


# =============================================================================
# Exception Handlers
# =============================================================================


async def api_error_handler(request: Request, exc: APIError) -> ProblemJSONResponse:
    """Handle APIError subclasses (NotFoundError, BadRequestError)."""
    return _problem_response(
        exc.error_code, exc.status_code, exc.message, str(request.url.path)
    )


async def youtube_error_handler(
    request: Request, exc: YouTubeAPIError | NetworkError
) -> ProblemJSONResponse:
    """Handle YouTube API and network failures as 502 responses."""
    logger.error("YouTube API failure: %s", exc.message)
    return _problem_response(
        ErrorCode.EXTERNAL_SERVICE_ERROR,
        502,
        "External service unavailable",
        str(request.url.path),
    )


async def video_not_found_handler(
    request: Request, exc: VideoNotFoundError
) -> ProblemJSONResponse:
    """Handle a video ID the YouTube API does not know."""
    return _problem_response(
        ErrorCode.NOT_FOUND, 404, exc.message, str(request.url.path)
    )


async def library_storage_error_handler(
    request: Request, exc: LibraryStorageError
) -> ProblemJSONResponse:
    """Handle library persistence failures without exposing file paths."""
    logger.error("Library storage error: %s", exc.message)
    return _problem_response(
        ErrorCode.STORAGE_ERROR,
        500,
        "The library could not be saved",
        str(request.url.path),
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> ProblemJSONResponse:
    """Handle request validation errors as 422 problem details with field errors."""
    errors = [
        FieldError(
            loc=list(error.get("loc", [])),
            msg=error.get("msg", ""),
            type=error.get("type", ""),
        )
        for error in exc.errors()
    ]
    problem = ValidationProblemDetail(
        type=get_error_type_uri(ErrorCode.VALIDATION_ERROR),
        title=ERROR_TITLES[ErrorCode.VALIDATION_ERROR],
        status=422,
        detail="Request validation failed",
        instance=str(request.url.path),
        code=ErrorCode.VALIDATION_ERROR.value,
        errors=errors,
    )
    return ProblemJSONResponse(content=problem.model_dump(), status_code=422)


async def generic_error_handler(
    request: Request, exc: Exception
) -> ProblemJSONResponse:
    """Handle unexpected exceptions without exposing internal details."""
    logger.exception("Unhandled exception: %s", exc)
    return _problem_response(
        ErrorCode.INTERNAL_ERROR,
        500,
        "An unexpected error occurred",
        str(request.url.path),
    )


# =============================================================================
# Handler Registration
# =============================================================================


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Examples
    --------
    >>> from fastapi import FastAPI
    >>> app = FastAPI()
    >>> register_exception_handlers(app)
    """
    app.add_exception_handler(APIError, api_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(YouTubeAPIError, youtube_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(NetworkError, youtube_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(VideoNotFoundError, video_not_found_handler)  # type: ignore[arg-type]
    app.add_exception_handler(LibraryStorageError, library_storage_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, generic_error_handler)
