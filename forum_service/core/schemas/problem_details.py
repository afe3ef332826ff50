"""RFC 7807 Problem Details schema for error responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProblemDetail(BaseModel):
    """RFC 7807 Problem Details for HTTP APIs.

    The ``error`` member repeats ``detail`` for clients that only read
    ``{"error": message}``.

    See: https://datatracker.ietf.org/doc/html/rfc7807
    """

    type: str = Field(
        default="about:blank",
        min_length=1,
        max_length=200,
        description="URI reference identifying the problem type",
    )
    title: str = Field(
        min_length=1, max_length=200, description="Short, human-readable summary of the problem"
    )
    status: int = Field(ge=100, le=599, description="HTTP status code")
    detail: str | None = Field(
        default=None,
        max_length=2000,
        description="Human-readable explanation specific to this occurrence",
    )
    instance: str | None = Field(
        default=None,
        max_length=500,
        description="URI reference identifying the specific occurrence",
    )
    error: str | None = Field(default=None, description="Client-facing error message")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "type": "conflicting-cursors",
                "title": "Bad Request",
                "status": 400,
                "detail": "conflicting cursors",
                "error": "conflicting cursors",
                "instance": "/api/v1/r/python/posts",
            }
        },
    )


class ValidationErrorItem(BaseModel):
    """One failed field of a request."""

    field: str
    message: str
    type: str


class ValidationProblemDetail(ProblemDetail):
    """Problem detail carrying field-level validation errors."""

    errors: list[ValidationErrorItem] = Field(default_factory=list)
