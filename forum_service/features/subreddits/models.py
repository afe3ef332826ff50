"""SQLAlchemy models for the subreddits feature."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import JSON, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from forum_service.core.database import ForumBase, utcnow

if TYPE_CHECKING:
    from forum_service.features.users.models import User


class Subreddit(ForumBase):
    """A community; listings are scoped to one by id."""

    __tablename__ = "subreddits"

    title: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        unique=True,
        index=True,
        comment="Unique subreddit name (e.g., 'python')",
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    main_topic: Mapped[str | None] = mapped_column(String(100), nullable=True)
    sub_topics: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    members: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    def __repr__(self) -> str:
        return f"<Subreddit(id={self.id}, title={self.title!r})>"


class Moderator(ForumBase):
    """Moderator membership; rows are listed in insertion (id) order."""

    __tablename__ = "subreddit_moderators"

    subreddit_id: Mapped[str] = mapped_column(
        String(24),
        ForeignKey("subreddits.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(24),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    username: Mapped[str] = mapped_column(String(64), nullable=False)
    permissions: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    date_of_moderation: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
    )


class Ban(ForumBase):
    """A user banned from a subreddit; lifting the ban sets ``deleted_at``."""

    __tablename__ = "subreddit_bans"

    subreddit_id: Mapped[str] = mapped_column(
        String(24),
        ForeignKey("subreddits.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(24),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    banned_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
    )
    ban_period: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        comment="Ban length in days; NULL means permanent",
    )
    mod_note: Mapped[str | None] = mapped_column(Text, nullable=True)
    note_include: Mapped[str | None] = mapped_column(Text, nullable=True)
    reason_for_ban: Mapped[str | None] = mapped_column(String(200), nullable=True)

    user: Mapped[User] = relationship(lazy="selectin")
