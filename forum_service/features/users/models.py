"""SQLAlchemy models for the users feature."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import JSON, DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from forum_service.core.database import ForumBase, utcnow


class User(ForumBase):
    """Forum account, as far as listings need it.

    Vote and saved lists hold item ids; viewer decoration reads them as sets.
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        unique=True,
        index=True,
    )
    avatar: Mapped[str | None] = mapped_column(String(500), nullable=True)
    user_photo: Mapped[str | None] = mapped_column(String(500), nullable=True)
    upvoted_posts: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    downvoted_posts: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    saved_posts: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    upvoted_comments: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    downvoted_comments: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    saved_comments: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username!r})>"


class Block(ForumBase):
    """One user blocking another; unblocking sets ``deleted_at``."""

    __tablename__ = "user_blocks"

    blocker_id: Mapped[str] = mapped_column(
        String(24),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    blocked_id: Mapped[str] = mapped_column(
        String(24),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    block_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
    )

    blocked: Mapped[User] = relationship(foreign_keys=[blocked_id], lazy="selectin")

    def __repr__(self) -> str:
        return f"<Block(blocker={self.blocker_id}, blocked={self.blocked_id})>"
