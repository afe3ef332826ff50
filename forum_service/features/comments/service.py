"""Service layer for the comments feature.

Handles:
- Subreddit comment listings, optionally restricted to a moderation queue
- Comment threads of a single post
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from forum_service.core.database import ComparisonFilter, is_object_id, normalize_object_id
from forum_service.core.exceptions import NotFoundException
from forum_service.core.listing import (
    COMMENT,
    COMMENT_CATEGORIES,
    THREAD_COMMENT,
    SQLAlchemyListingStore,
    run_listing,
)
from forum_service.features.comments.models import Comment
from forum_service.features.posts.repository import PostRepository
from forum_service.features.subreddits.service import SubredditService
from forum_service.features.users.service import UserService, VoteTarget
from forum_service.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from datetime import datetime

    from sqlalchemy.ext.asyncio import AsyncSession

    from forum_service.core.listing import ItemCategory, ListingParams, Page
    from forum_service.features.posts.models import Post

logger = logging.getLogger(__name__)
lazy_logger = get_lazy_logger(__name__)


class CommentService:
    """Comment listings scoped to a subreddit or to a post."""

    def __init__(
        self,
        session: AsyncSession,
        posts: PostRepository | None = None,
    ) -> None:
        self._session = session
        self._posts = posts or PostRepository()
        self._subreddits = SubredditService(session)
        self._users = UserService(session)

    async def list_subreddit_comments(
        self,
        subreddit_name: str,
        params: ListingParams,
        *,
        viewer_id: str | None = None,
        category: ItemCategory | None = None,
        now: datetime | None = None,
    ) -> Page:
        """List comments of ``subreddit_name``; each child carries its post title.

        Raises:
            NotFoundException: Unknown or deleted subreddit.
            BadRequestException: Conflicting ``before`` and ``after``.
        """
        subreddit = await self._subreddits.get_listing_subreddit(subreddit_name)
        viewer = await self._users.get_viewer_state(viewer_id, VoteTarget.COMMENTS)

        kind = COMMENT if category is None else COMMENT_CATEGORIES[category]
        store = SQLAlchemyListingStore(
            self._session,
            Comment,
            scope=[ComparisonFilter(Comment.subreddit_id, "eq", subreddit.id)],
        )
        page = await run_listing(kind, params, store, viewer=viewer, now=now)

        lazy_logger.debug(
            lambda: f"service.list_subreddit_comments({subreddit_name!r}, kind={kind.name}) "
            f"-> {len(page.children)} comments"
        )
        return page

    async def get_post(self, post_id: str) -> Post:
        """Active post by id.

        Raises:
            NotFoundException: Malformed id, unknown or deleted post.
        """
        post = None
        if is_object_id(post_id):
            post = await self._posts.get_active(self._session, normalize_object_id(post_id))
        if post is None:
            logger.info("Comments requested for missing post", extra={"post_id": post_id})
            raise NotFoundException(
                detail="Post not found",
                type="post-not-found",
                extra={"post_id": post_id},
            )
        return post

    async def list_post_comments(
        self,
        post_id: str,
        params: ListingParams,
        *,
        viewer_id: str | None = None,
        now: datetime | None = None,
    ) -> Page:
        """List the comments of one post, most voted first by default."""
        post = await self.get_post(post_id)
        viewer = await self._users.get_viewer_state(viewer_id, VoteTarget.COMMENTS)

        store = SQLAlchemyListingStore(
            self._session,
            Comment,
            scope=[ComparisonFilter(Comment.post_id, "eq", post.id)],
        )
        return await run_listing(THREAD_COMMENT, params, store, viewer=viewer, now=now)
