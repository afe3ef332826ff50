"""Shared API schemas."""

from forum_service.core.schemas.listing import ListingChild, ListingResponse
from forum_service.core.schemas.problem_details import (
    ProblemDetail,
    ValidationErrorItem,
    ValidationProblemDetail,
)

__all__ = [
    "ListingChild",
    "ListingResponse",
    "ProblemDetail",
    "ValidationErrorItem",
    "ValidationProblemDetail",
]
