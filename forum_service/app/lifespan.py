"""Application lifespan management.

Startup: logging, then the database (connectivity check and optional table
creation). Shutdown runs in reverse order.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from forum_service.core.settings import get_app_settings, get_logging_settings
from forum_service.infra.logging.config import setup_logging

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from fastapi import FastAPI

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Start and stop application services."""
    app_settings = get_app_settings()
    setup_logging(get_logging_settings())

    logger.info(
        "Starting application",
        extra={
            "service": app_settings.service_name,
            "version": app_settings.version,
            "environment": app_settings.environment,
        },
    )

    # Imported lazily so the engine is created after logging is configured
    from forum_service.infra.database import close_database, init_database

    await init_database()
    try:
        yield
    finally:
        await close_database()
        logger.info("Application stopped", extra={"service": app_settings.service_name})
