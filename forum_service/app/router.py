"""Router registry and setup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from forum_service.core.settings import get_app_settings
from forum_service.features.comments.router import router as comments_router
from forum_service.features.comments.router import subreddit_router as subreddit_comments_router
from forum_service.features.posts.router import router as posts_router
from forum_service.features.subreddits.router import router as subreddits_router
from forum_service.features.users.router import router as users_router

if TYPE_CHECKING:
    from fastapi import FastAPI

    from forum_service.core.settings.app import AppSettings

logger = logging.getLogger(__name__)


def setup_routers(app: FastAPI, app_settings: AppSettings | None = None) -> None:
    """Register all feature routers under the API prefix."""
    settings = app_settings or get_app_settings()
    prefix = settings.api_prefix

    app.include_router(subreddits_router, prefix=prefix)
    app.include_router(posts_router, prefix=prefix)
    app.include_router(subreddit_comments_router, prefix=prefix)
    app.include_router(comments_router, prefix=prefix)
    app.include_router(users_router, prefix=prefix)

    logger.info("Routers configured", extra={"api_prefix": prefix})
