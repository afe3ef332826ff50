"""Service layer for the subreddits feature.

Handles:
- Subreddit lookup by title or id (400 errors for the community endpoints)
- Resolving the subreddit a listing is scoped to (404 when absent)
- Moderator and banned-user listings
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from forum_service.core.database import ComparisonFilter, is_object_id, normalize_object_id
from forum_service.core.exceptions import BadRequestException, NotFoundException
from forum_service.core.listing import BANNED_USER, MODERATOR, SQLAlchemyListingStore, run_listing
from forum_service.features.subreddits.models import Ban, Moderator, Subreddit
from forum_service.features.subreddits.repository import (
    SubredditRepository,
    get_subreddit_repository,
)
from forum_service.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from forum_service.core.listing import ListingParams, Page

logger = logging.getLogger(__name__)
lazy_logger = get_lazy_logger(__name__)


class SubredditService:
    """Subreddit lookups and the subreddit-scoped user listings."""

    def __init__(
        self,
        session: AsyncSession,
        repo: SubredditRepository | None = None,
    ) -> None:
        self._session = session
        self._repo = repo or get_subreddit_repository()

    async def search_subreddit(self, name: str) -> Subreddit:
        """Find an active subreddit by title.

        Raises:
            BadRequestException: Unknown or deleted subreddit.
        """
        subreddit = await self._repo.get_by_title(self._session, name)
        return self._ensure_active(subreddit, name)

    async def search_subreddit_by_id(self, subreddit_id: str) -> Subreddit:
        """Find an active subreddit by id.

        Raises:
            BadRequestException: Malformed id, unknown or deleted subreddit.
        """
        if not is_object_id(subreddit_id):
            raise BadRequestException(
                detail="This is not a valid subreddit id",
                type="invalid-subreddit-id",
            )
        subreddit = await self._repo.get(self._session, normalize_object_id(subreddit_id))
        return self._ensure_active(subreddit, subreddit_id)

    @staticmethod
    def _ensure_active(subreddit: Subreddit | None, key: str) -> Subreddit:
        if subreddit is None:
            raise BadRequestException(
                detail="This subreddit isn't found",
                type="subreddit-not-found",
                extra={"subreddit": key},
            )
        if subreddit.is_deleted:
            raise BadRequestException(
                detail="This subreddit is deleted",
                type="subreddit-deleted",
                extra={"subreddit": key},
            )
        return subreddit

    async def get_listing_subreddit(self, name: str) -> Subreddit:
        """Subreddit a listing is scoped to.

        Raises:
            NotFoundException: Unknown or deleted subreddit.
        """
        try:
            return await self.search_subreddit(name)
        except BadRequestException:
            logger.info("Listing requested for missing subreddit", extra={"subreddit": name})
            raise NotFoundException(
                detail="Subreddit not found",
                type="subreddit-not-found",
                extra={"subreddit": name},
            ) from None

    async def list_moderators(self, name: str, params: ListingParams) -> Page:
        """Moderators of a subreddit in the order they were added."""
        subreddit = await self.get_listing_subreddit(name)
        store = SQLAlchemyListingStore(
            self._session,
            Moderator,
            scope=[ComparisonFilter(Moderator.subreddit_id, "eq", subreddit.id)],
        )
        page = await run_listing(MODERATOR, params, store)
        lazy_logger.debug(lambda: f"service.list_moderators({name!r}) -> {len(page.children)}")
        return page

    async def list_banned_users(self, name: str, params: ListingParams) -> Page:
        """Users currently banned from a subreddit; lifted bans are skipped."""
        subreddit = await self.get_listing_subreddit(name)
        store = SQLAlchemyListingStore(
            self._session,
            Ban,
            scope=[ComparisonFilter(Ban.subreddit_id, "eq", subreddit.id)],
        )
        page = await run_listing(BANNED_USER, params, store)
        lazy_logger.debug(lambda: f"service.list_banned_users({name!r}) -> {len(page.children)}")
        return page
