"""Base database model classes with composable mixins.

Models mix and match capabilities:
- ObjectIdPKMixin: 24-hex time-ordered string primary key
- TimestampMixin: created_at / updated_at tracking
- SoftDeleteMixin: logical deletion through deleted_at

Example:
    class Post(Base, ObjectIdPKMixin, TimestampMixin, SoftDeleteMixin):
        __tablename__ = "posts"
        title: Mapped[str] = mapped_column(String(300))
"""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import DateTime, MetaData, String
from sqlalchemy.orm import DeclarativeBase, Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from forum_service.core.database.utils import generate_object_id

# Consistent naming convention for database constraints
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def utcnow() -> datetime:
    """Timezone-aware current time in UTC."""
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Declarative base with constraint naming and default table names."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)

    @declared_attr.directive
    def __tablename__(cls) -> str:
        return cls.__name__.lower()


class ObjectIdPKMixin:
    """24-hex-character string primary key.

    Ids embed their creation second and a per-process counter, so within one
    process ``ORDER BY id`` is insertion order and ``id < anchor`` means
    "created before the anchor".
    """

    __allow_unmapped__ = True

    id: Mapped[str] = mapped_column(
        String(24),
        primary_key=True,
        default=generate_object_id,
        comment="Time-ordered 24-hex identifier",
    )


class TimestampMixin:
    """Timestamp tracking for create and update operations."""

    __allow_unmapped__ = True

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        nullable=False,
        index=True,
        comment="Timestamp of record creation",
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        onupdate=utcnow,
        nullable=False,
        comment="Timestamp of last update",
    )


class SoftDeleteMixin:
    """Soft delete support for logical (reversible) deletion.

    Soft-deleted rows stay in the table. Listings exclude them through their
    base filter and never accept them as pagination anchors.

    Usage:
        post.deleted_at = utcnow()
        await session.commit()

        stmt = select(Post).where(Post.deleted_at.is_(None))
    """

    __allow_unmapped__ = True

    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
        comment="Timestamp of soft deletion",
    )

    @property
    def is_deleted(self) -> bool:
        """True if deleted_at is set."""
        return self.deleted_at is not None


class ForumBase(Base, ObjectIdPKMixin, TimestampMixin, SoftDeleteMixin):
    """Convenience base for forum entities: object id, timestamps, soft delete."""

    __abstract__ = True
