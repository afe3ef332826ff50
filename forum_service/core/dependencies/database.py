"""Database dependencies for FastAPI route handlers.

Two session getters exist:

1. ``get_db_session()`` (this module) - FastAPI dependency, one session per request.
2. ``get_async_session()`` (infra.database) - async context manager for scripts.

Usage:
    from forum_service.core.dependencies.database import get_db_session

    @router.get("/r/{subreddit}/posts")
    async def list_posts(session: Annotated[AsyncSession, Depends(get_db_session)]):
        ...
"""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from forum_service.infra.database import get_async_session


async def get_db_session() -> AsyncGenerator[AsyncSession]:
    """FastAPI dependency for database session.

    Yields:
        Database session that is automatically closed after request.
    """
    async with get_async_session() as session:
        yield session
