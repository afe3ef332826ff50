"""Unified settings composition for convenient access.

Usage:
    from forum_service.core.settings import get_settings

    settings = get_settings()
    print(settings.app.api_prefix)
    print(settings.listing.max_limit)
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from .app import AppSettings
from .database import DatabaseSettings
from .listing import ListingSettings
from .loader import (
    get_app_settings,
    get_db_settings,
    get_listing_settings,
    get_logging_settings,
)
from .logs import LoggingSettings


@dataclass(frozen=True, slots=True)
class Settings:
    """All settings domains in one immutable object."""

    app: AppSettings
    db: DatabaseSettings
    logging: LoggingSettings
    listing: ListingSettings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the cached unified settings built from the per-domain loaders."""
    return Settings(
        app=get_app_settings(),
        db=get_db_settings(),
        logging=get_logging_settings(),
        listing=get_listing_settings(),
    )
