"""SQLAlchemy models for the comments feature."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from forum_service.core.database import ForumBase
from forum_service.features.posts.models import Post


class Comment(ForumBase):
    """A comment on a post.

    The parent post is loaded eagerly because subreddit comment listings show
    its title next to every comment.
    """

    __tablename__ = "comments"

    post_id: Mapped[str] = mapped_column(
        String(24),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    subreddit_id: Mapped[str] = mapped_column(
        String(24),
        ForeignKey("subreddits.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    subreddit_name: Mapped[str] = mapped_column(String(100), nullable=False)
    owner_username: Mapped[str] = mapped_column(String(64), nullable=False)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    number_of_votes: Mapped[int] = mapped_column(Integer, default=1, nullable=False, index=True)
    edited_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    spammed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    approved_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    removed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    post: Mapped[Post] = relationship(lazy="selectin")

    def __repr__(self) -> str:
        return f"<Comment(id={self.id}, post_id={self.post_id})>"
