"""Minimal generic repository for SQLAlchemy models.

Provides primary-key and attribute lookups with explicit session passing.
For complex queries, use the session directly - this is a convenience, not a cage.

Example:
    class SubredditRepository(BaseRepository[Subreddit]):
        async def get_by_title(self, session: AsyncSession, title: str) -> Subreddit | None:
            return await self.get_by(session, Subreddit.title, title)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import select

from forum_service.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sqlalchemy.ext.asyncio import AsyncSession
    from sqlalchemy.orm import InstrumentedAttribute


class BaseRepository[T]:
    """Minimal generic repository for lookups.

    Provides:
        - get(session, id) -> T | None
        - get_by(session, attr, value) -> T | None

    Session is always explicit - no hidden state.
    """

    __slots__ = ("_lazy", "model")

    def __init__(self, model: type[T]) -> None:
        self.model = model
        self._lazy = get_lazy_logger(f"repository.{model.__name__}")

    async def get(
        self,
        session: AsyncSession,
        id: Any,  # noqa: A002
        *,
        options: Iterable[Any] | None = None,
    ) -> T | None:
        """Get entity by primary key, soft-deleted rows included.

        Args:
            session: Database session
            id: Primary key value
            options: SQLAlchemy loader options (e.g., selectinload)

        Returns:
            Entity if found, None otherwise
        """
        instance = await session.get(self.model, id, options=list(options) if options else None)

        self._lazy.debug(
            lambda: f"db.get: {self.model.__name__}({id}) -> {'found' if instance else 'not found'}"
        )
        return instance

    async def get_by(
        self,
        session: AsyncSession,
        attr: InstrumentedAttribute[Any],
        value: Any,
        *,
        options: Iterable[Any] | None = None,
    ) -> T | None:
        """Get entity by arbitrary attribute.

        Example:
            subreddit = await repo.get_by(session, Subreddit.title, "python")
        """
        stmt = select(self.model).where(attr == value)
        if options:
            stmt = stmt.options(*options)
        result = await session.execute(stmt)
        instance = result.scalars().first()

        self._lazy.debug(
            lambda: f"db.get_by: {self.model.__name__}.{attr.key}={value!r} -> {'found' if instance else 'not found'}"
        )
        return instance

