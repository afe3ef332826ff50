"""Repository for the users feature."""

from __future__ import annotations

from typing import TYPE_CHECKING

from forum_service.core.database.repository import BaseRepository
from forum_service.features.users.models import User

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


class UserRepository(BaseRepository[User]):
    """Repository for User model."""

    def __init__(self) -> None:
        super().__init__(User)

    async def get_active(self, session: AsyncSession, user_id: str) -> User | None:
        """Get a user by id, treating soft-deleted accounts as absent."""
        user = await self.get(session, user_id)
        if user is None or user.is_deleted:
            return None
        return user


_user_repository: UserRepository | None = None


def get_user_repository() -> UserRepository:
    """Get the shared UserRepository instance."""
    global _user_repository
    if _user_repository is None:
        _user_repository = UserRepository()
    return _user_repository
