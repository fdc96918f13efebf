"""API response envelope and RFC 7807 problem detail schemas."""

from __future__ import annotations

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, Field
from starlette.responses import JSONResponse


class ErrorCode(str, Enum):
    """Machine-readable ``code`` carried by every problem response.

    Client errors map to 400, 404 and 422; ``STORAGE_ERROR`` and
    ``INTERNAL_ERROR`` to 500; ``EXTERNAL_SERVICE_ERROR`` to 502 when the
    YouTube API fails.
    """

    NOT_FOUND = "NOT_FOUND"
    BAD_REQUEST = "BAD_REQUEST"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    INTERNAL_ERROR = "INTERNAL_ERROR"
    STORAGE_ERROR = "STORAGE_ERROR"
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"


ERROR_TYPE_BASE: str = "https://awashtube.dev/errors"
"""Base URI for constructing RFC 7807 type URIs."""


def get_error_type_uri(code: ErrorCode) -> str:
    """Type URI for ``code``.

    Examples
    --------
    >>> get_error_type_uri(ErrorCode.NOT_FOUND)
    'https://awashtube.dev/errors/NOT_FOUND'
    """
    return f"{ERROR_TYPE_BASE}/{code.value}"


ERROR_TITLES: dict[ErrorCode, str] = {
    ErrorCode.NOT_FOUND: "Resource Not Found",
    ErrorCode.BAD_REQUEST: "Bad Request",
    ErrorCode.VALIDATION_ERROR: "Validation Error",
    ErrorCode.INTERNAL_ERROR: "Internal Server Error",
    ErrorCode.STORAGE_ERROR: "Storage Error",
    ErrorCode.EXTERNAL_SERVICE_ERROR: "External Service Error",
}
"""Mapping from ErrorCode to human-readable RFC 7807 title."""

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Standard API response wrapper."""

    data: T


class ProblemDetail(BaseModel):
    """Error body following RFC 7807, plus an application ``code``.

    ``instance`` is the request path; ``type`` is built from ``code`` with
    ``get_error_type_uri``.
    """

    type: str = Field(
        ...,
        description="URI identifying the problem type",
        examples=["https://awashtube.dev/errors/NOT_FOUND"],
    )
    title: str = Field(..., description="Short human-readable summary")
    status: int = Field(..., ge=400, le=599, description="HTTP status code")
    detail: str = Field(
        ...,
        description="Human-readable explanation of the problem",
        examples=["Video 'dQw4w9WgXcQ' not found"],
    )
    instance: str = Field(
        ...,
        description="URI reference of the specific occurrence",
        examples=["/api/v1/videos/dQw4w9WgXcQ"],
    )
    code: str = Field(..., description="Application-specific error code")


class FieldError(BaseModel):
    """Individual field validation error for 422 responses."""

    loc: list[str | int] = Field(..., examples=[["query", "max_results"]])
    msg: str
    type: str


class ValidationProblemDetail(ProblemDetail):
    """Problem details carrying the field-level validation errors."""

    errors: list[FieldError] = Field(
        ...,
        description="List of field-level validation errors",
    )


class ProblemJSONResponse(JSONResponse):
    """JSONResponse with the ``application/problem+json`` media type."""

    media_type = "application/problem+json"
