"""Modular Pydantic Settings v2 configuration.

- One settings class per domain (app, db, logging, listing)
- Environment variables with a per-domain prefix, optional .env file
- LRU-cached, frozen settings objects

Import settings via cached loaders:
    from forum_service.core.settings import get_listing_settings

Or use unified settings:
    from forum_service.core.settings import get_settings
"""

from __future__ import annotations

from .loader import (
    clear_settings_cache,
    get_app_settings,
    get_db_settings,
    get_listing_settings,
    get_logging_settings,
)
from .unified import Settings, get_settings

__all__ = [
    "Settings",
    "clear_settings_cache",
    "get_app_settings",
    "get_db_settings",
    "get_listing_settings",
    "get_logging_settings",
    "get_settings",
]
