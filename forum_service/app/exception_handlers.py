"""Global exception handlers for FastAPI application.

Every error body is an RFC 7807 problem detail with an extra ``error``
member holding the client-facing message.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from forum_service.core.database.exceptions import NotFoundError
from forum_service.core.exceptions import AppException
from forum_service.core.schemas.problem_details import (
    ProblemDetail,
    ValidationErrorItem,
    ValidationProblemDetail,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred while processing your request"


def _get_request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


def _create_problem_detail(
    status_code: int,
    detail: str,
    type_: str = "about:blank",
    title: str | None = None,
    instance: str | None = None,
    extra: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Create RFC 7807 Problem Details response body.

    Args:
        status_code: HTTP status code.
        detail: Human-readable error description.
        type_: Error type identifier.
        title: Short human-readable summary.
        instance: URI identifying this occurrence.
        extra: Additional context information.

    Returns:
        Dictionary representing the problem detail.
    """
    problem = ProblemDetail(
        type=type_,
        title=title or AppException._default_title(status_code),
        status=status_code,
        detail=detail,
        instance=instance,
        error=detail,
    )

    response_data = problem.model_dump(exclude_none=True)
    if extra:
        response_data.update({k: v for k, v in extra.items() if k not in response_data})
    return response_data


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Convert AppException into a problem detail carrying its status code."""
    request_id = _get_request_id(request)

    logger.warning(
        "Application exception occurred",
        extra={
            "request_id": request_id,
            "path": request.url.path,
            "method": request.method,
            "exception_type": exc.type,
            "status_code": exc.status_code,
            "detail": exc.detail,
        },
    )

    problem_data = _create_problem_detail(
        status_code=exc.status_code,
        detail=exc.detail,
        type_=exc.type,
        title=exc.title,
        instance=exc.instance or request.url.path,
        extra=exc.extra,
    )
    if request_id:
        problem_data["request_id"] = request_id

    return JSONResponse(status_code=exc.status_code, content=problem_data)


async def not_found_error_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    """Repository NotFoundError becomes a 404."""
    request_id = _get_request_id(request)

    logger.info(
        "Entity not found",
        extra={
            "request_id": request_id,
            "path": request.url.path,
            "model": exc.model_name,
        },
    )

    problem_data = _create_problem_detail(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{exc.model_name} not found",
        type_="not-found",
        instance=request.url.path,
    )
    if request_id:
        problem_data["request_id"] = request_id

    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=problem_data)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Convert request validation errors into a 422 problem detail with field errors."""
    request_id = _get_request_id(request)

    validation_errors = [
        ValidationErrorItem(
            field=".".join(str(loc) for loc in error["loc"]),
            message=error["msg"],
            type=error["type"],
        )
        for error in exc.errors()
    ]

    logger.warning(
        "Request validation failed",
        extra={
            "request_id": request_id,
            "path": request.url.path,
            "method": request.method,
            "error_count": len(validation_errors),
        },
    )

    detail = f"Request validation failed for {len(validation_errors)} field(s)"
    problem = ValidationProblemDetail(
        type="validation-error",
        title="Validation Error",
        status=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=detail,
        instance=request.url.path,
        error=detail,
        errors=validation_errors,
    )

    response_data = problem.model_dump(exclude_none=True)
    if request_id:
        response_data["request_id"] = request_id

    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content=response_data)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the traceback and return a generic 500 without internal details."""
    request_id = _get_request_id(request)

    logger.error(
        "Unexpected exception occurred",
        extra={
            "request_id": request_id,
            "path": request.url.path,
            "method": request.method,
            "exception_type": type(exc).__name__,
            "exception_message": str(exc),
        },
        exc_info=True,
    )

    problem_data = _create_problem_detail(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=INTERNAL_ERROR_MESSAGE,
        type_="internal-error",
        title="Internal Server Error",
        instance=request.url.path,
    )
    if request_id:
        problem_data["request_id"] = request_id

    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=problem_data)


def configure_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the application."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(NotFoundError, not_found_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    logger.info("Exception handlers configured")
