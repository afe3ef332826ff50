"""Service layer for the users feature: viewer state and blocked users."""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import TYPE_CHECKING

from forum_service.core.database import ComparisonFilter
from forum_service.core.exceptions import UnauthorizedException
from forum_service.core.listing import BLOCKED_USER, SQLAlchemyListingStore, ViewerState, run_listing
from forum_service.features.users.models import Block, User
from forum_service.features.users.repository import UserRepository, get_user_repository
from forum_service.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from forum_service.core.listing import ListingParams, Page

logger = logging.getLogger(__name__)
lazy_logger = get_lazy_logger(__name__)


class VoteTarget(StrEnum):
    """Which of the user's vote lists decorate a listing."""

    POSTS = "posts"
    COMMENTS = "comments"


def viewer_state(user: User | None, target: VoteTarget) -> ViewerState:
    """Snapshot the user's votes and saved items for one item type."""
    if user is None:
        return ViewerState.anonymous()
    if target == VoteTarget.POSTS:
        return ViewerState.of(
            user.id,
            upvoted=user.upvoted_posts,
            downvoted=user.downvoted_posts,
            saved=user.saved_posts,
        )
    return ViewerState.of(
        user.id,
        upvoted=user.upvoted_comments,
        downvoted=user.downvoted_comments,
        saved=user.saved_comments,
    )


class UserService:
    """Resolves viewers and lists the users they blocked."""

    def __init__(
        self,
        session: AsyncSession,
        repo: UserRepository | None = None,
    ) -> None:
        self._session = session
        self._repo = repo or get_user_repository()

    async def get_viewer(self, viewer_id: str | None) -> User | None:
        """Load the viewer; unknown and deleted accounts are anonymous."""
        if viewer_id is None:
            return None
        user = await self._repo.get_active(self._session, viewer_id)
        lazy_logger.debug(
            lambda: f"service.get_viewer({viewer_id}) -> {'found' if user else 'anonymous'}"
        )
        return user

    async def get_viewer_state(
        self,
        viewer_id: str | None,
        target: VoteTarget,
    ) -> ViewerState:
        return viewer_state(await self.get_viewer(viewer_id), target)

    async def list_blocked_users(self, viewer_id: str | None, params: ListingParams) -> Page:
        """List the users the viewer blocked, oldest block first.

        Raises:
            UnauthorizedException: The request has no usable viewer.
        """
        viewer = await self.get_viewer(viewer_id)
        if viewer is None:
            raise UnauthorizedException(
                detail="Viewer identity required",
                type="viewer-required",
            )

        store = SQLAlchemyListingStore(
            self._session,
            Block,
            scope=[ComparisonFilter(Block.blocker_id, "eq", viewer.id)],
        )
        page = await run_listing(BLOCKED_USER, params, store)

        logger.info(
            "Listed blocked users",
            extra={"user_id": viewer.id, "count": len(page.children)},
        )
        return page
