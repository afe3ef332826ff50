"""Pytest configuration and shared fixtures.

Organization:
    - Environment: settings pointed at an in-memory database
    - Database Fixtures: SQLAlchemy engine and session with all tables created
    - Application Fixtures: FastAPI app with the session dependency overridden
    - Data Fixtures: factories for subreddits, posts, comments and users
"""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator, Awaitable, Callable
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

if TYPE_CHECKING:
    from fastapi import FastAPI
    from sqlalchemy.ext.asyncio import AsyncEngine

# Keep tests off the developer database and quiet on the console
os.environ.setdefault("DB_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("LOG_CONSOLE_ENABLED", "false")

API = "/api/v1"

# Fixed clock: every seeded timestamp is computed from here
NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=UTC)


ID_EPOCH = NOW - timedelta(days=400)


def make_id(offset_seconds: int) -> str:
    """Deterministic, time-ordered id ``offset_seconds`` after ID_EPOCH.

    The same offset always yields the same id.
    """
    seconds = int((ID_EPOCH + timedelta(seconds=offset_seconds)).timestamp())
    counter = offset_seconds & 0xFFFFFF
    return (seconds.to_bytes(4, "big") + bytes(5) + counter.to_bytes(3, "big")).hex()


def timed_id(created: datetime) -> str:
    """Fresh id whose embedded time is ``created``; unique per call."""
    from forum_service.core.database.utils import generate_object_id

    return generate_object_id(created.timestamp())


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    from forum_service.core.settings import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


# ============================================================================
# Database Fixtures
# ============================================================================


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine]:
    """Async SQLAlchemy engine on a fresh in-memory SQLite database."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def db_session(db_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Session with every feature table created; tables are dropped afterwards."""
    import forum_service.features.models  # noqa: F401
    from forum_service.core.database import Base

    async with db_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()

    async with db_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


# ============================================================================
# Application Fixtures
# ============================================================================


@pytest.fixture
def app(db_session: AsyncSession) -> FastAPI:
    """FastAPI application whose session dependency yields ``db_session``."""
    from forum_service.app.main import create_app
    from forum_service.core.dependencies.database import get_db_session

    application = create_app()

    async def _override() -> AsyncGenerator[AsyncSession]:
        yield db_session

    application.dependency_overrides[get_db_session] = _override
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """HTTPX client talking to the app in-process."""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ============================================================================
# Data Fixtures
# ============================================================================

Factory = Callable[..., Awaitable[Any]]


@pytest.fixture
def add(db_session: AsyncSession) -> Factory:
    """Persist an instance and return it."""

    async def _add(instance: Any) -> Any:
        db_session.add(instance)
        await db_session.commit()
        return instance

    return _add


@pytest.fixture
def make_subreddit(add: Factory) -> Factory:
    from forum_service.features.subreddits.models import Subreddit

    async def _make(title: str = "python", **kwargs: Any) -> Subreddit:
        kwargs.setdefault("created_at", NOW - timedelta(days=300))
        return await add(Subreddit(title=title, **kwargs))

    return _make


@pytest.fixture
def make_user(add: Factory) -> Factory:
    from forum_service.features.users.models import User

    counter = iter(range(1, 10_000))

    async def _make(username: str | None = None, **kwargs: Any) -> User:
        n = next(counter)
        kwargs.setdefault("id", make_id(n))
        return await add(User(username=username or f"user{n}", **kwargs))

    return _make


@pytest.fixture
def make_post(add: Factory) -> Factory:
    """Posts are created ``minutes_ago`` before NOW, ids follow creation time."""
    from forum_service.features.posts.models import Post

    async def _make(subreddit: Any, minutes_ago: int, **kwargs: Any) -> Post:
        created = NOW - timedelta(minutes=minutes_ago)
        kwargs.setdefault("id", timed_id(created))
        kwargs.setdefault("title", f"post {minutes_ago}")
        kwargs.setdefault("owner_username", "author")
        return await add(
            Post(
                subreddit_id=subreddit.id,
                subreddit_name=subreddit.title,
                created_at=created,
                **kwargs,
            )
        )

    return _make


@pytest.fixture
def make_comment(add: Factory) -> Factory:
    from forum_service.features.comments.models import Comment

    async def _make(post: Any, minutes_ago: int, **kwargs: Any) -> Comment:
        created = NOW - timedelta(minutes=minutes_ago)
        kwargs.setdefault("id", timed_id(created))
        kwargs.setdefault("owner_username", "commenter")
        kwargs.setdefault("content", f"comment {minutes_ago}")
        return await add(
            Comment(
                post=post,
                post_id=post.id,
                subreddit_id=post.subreddit_id,
                subreddit_name=post.subreddit_name,
                created_at=created,
                **kwargs,
            )
        )

    return _make
