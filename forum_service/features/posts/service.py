"""Service layer for the posts feature: subreddit post listings."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from forum_service.core.database import ComparisonFilter
from forum_service.core.listing import POST, POST_CATEGORIES, SQLAlchemyListingStore, run_listing
from forum_service.features.posts.models import Post
from forum_service.features.subreddits.service import SubredditService
from forum_service.features.users.service import UserService, VoteTarget
from forum_service.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from datetime import datetime

    from sqlalchemy.ext.asyncio import AsyncSession

    from forum_service.core.listing import ItemCategory, ListingParams, Page

logger = logging.getLogger(__name__)
lazy_logger = get_lazy_logger(__name__)


class PostService:
    """Lists the posts of a subreddit, optionally restricted to a moderation queue."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._subreddits = SubredditService(session)
        self._users = UserService(session)

    async def list_subreddit_posts(
        self,
        subreddit_name: str,
        params: ListingParams,
        *,
        viewer_id: str | None = None,
        category: ItemCategory | None = None,
        now: datetime | None = None,
    ) -> Page:
        """List posts of ``subreddit_name`` decorated with the viewer's votes.

        Raises:
            NotFoundException: Unknown or deleted subreddit.
            BadRequestException: Conflicting ``before`` and ``after``.
        """
        subreddit = await self._subreddits.get_listing_subreddit(subreddit_name)
        viewer = await self._users.get_viewer_state(viewer_id, VoteTarget.POSTS)

        kind = POST if category is None else POST_CATEGORIES[category]
        store = SQLAlchemyListingStore(
            self._session,
            Post,
            scope=[ComparisonFilter(Post.subreddit_id, "eq", subreddit.id)],
        )
        page = await run_listing(kind, params, store, viewer=viewer, now=now)

        lazy_logger.debug(
            lambda: f"service.list_subreddit_posts({subreddit_name!r}, kind={kind.name}) "
            f"-> {len(page.children)} posts"
        )
        return page
