"""Repository for the posts feature."""

from __future__ import annotations

from typing import TYPE_CHECKING

from forum_service.core.database.repository import BaseRepository
from forum_service.features.posts.models import Post

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


class PostRepository(BaseRepository[Post]):
    """Repository for Post model."""

    def __init__(self) -> None:
        super().__init__(Post)

    async def get_active(self, session: AsyncSession, post_id: str) -> Post | None:
        """Get a post by id, treating soft-deleted posts as absent."""
        post = await self.get(session, post_id)
        if post is None or post.is_deleted:
            return None
        return post
