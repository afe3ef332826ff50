"""SQLAlchemy models for the posts feature."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from forum_service.core.database import ForumBase


class Post(ForumBase):
    """A post in a subreddit.

    ``number_of_votes`` backs the vote count, ``score`` the ``hot`` ordering.
    Moderation state is tracked through the ``*_at`` timestamps; a NULL value
    means the action never happened.
    """

    __tablename__ = "posts"

    subreddit_id: Mapped[str] = mapped_column(
        String(24),
        ForeignKey("subreddits.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    subreddit_name: Mapped[str] = mapped_column(String(100), nullable=False)
    owner_username: Mapped[str] = mapped_column(String(64), nullable=False)
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    link: Mapped[str | None] = mapped_column(String(2000), nullable=True)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    images: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    video: Mapped[str | None] = mapped_column(String(2000), nullable=True)
    nsfw: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    spoiler: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    flair: Mapped[str | None] = mapped_column(String(64), nullable=True)
    number_of_votes: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    number_of_comments: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    score: Mapped[float] = mapped_column(Float, default=0.0, nullable=False, index=True)
    edited_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    spammed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    approved_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    removed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, title={self.title!r})>"
