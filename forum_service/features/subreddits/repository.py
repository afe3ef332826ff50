"""Repository for the subreddits feature."""

from __future__ import annotations

from typing import TYPE_CHECKING

from forum_service.core.database.repository import BaseRepository
from forum_service.features.subreddits.models import Subreddit

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


class SubredditRepository(BaseRepository[Subreddit]):
    """Repository for Subreddit model.

    Inherits from BaseRepository:
        - get(session, id) -> Subreddit | None
        - get_by(session, attr, value) -> Subreddit | None
    """

    def __init__(self) -> None:
        super().__init__(Subreddit)

    async def get_by_title(self, session: AsyncSession, title: str) -> Subreddit | None:
        """Get a subreddit by its unique title, soft-deleted ones included."""
        subreddit = await self.get_by(session, Subreddit.title, title)
        self._lazy.debug(lambda: f"db.get_by_title({title!r}) -> {subreddit is not None}")
        return subreddit


_subreddit_repository: SubredditRepository | None = None


def get_subreddit_repository() -> SubredditRepository:
    """Get the shared SubredditRepository instance."""
    global _subreddit_repository
    if _subreddit_repository is None:
        _subreddit_repository = SubredditRepository()
    return _subreddit_repository
