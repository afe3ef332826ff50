"""Core database package: declarative base, mixins, filters and repository.

Base Classes and Mixins:
    - Base: Declarative base with constraint naming convention
    - ObjectIdPKMixin: 24-hex time-ordered string primary key
    - TimestampMixin: created_at, updated_at tracking
    - SoftDeleteMixin: Soft delete support with deleted_at
    - ForumBase: All three mixins combined

Repository:
    - BaseRepository[T]: Generic CRUD with explicit session passing

Query Filters:
    - ComparisonFilter, KeysetFilter, OrderBy, Limit, FilterGroup

Exceptions:
    - RepositoryError, NotFoundError, InvalidFilterError
"""

from __future__ import annotations

from forum_service.core.database.base import (
    NAMING_CONVENTION,
    Base,
    ForumBase,
    ObjectIdPKMixin,
    SoftDeleteMixin,
    TimestampMixin,
    utcnow,
)
from forum_service.core.database.exceptions import (
    InvalidFilterError,
    NotFoundError,
    RepositoryError,
)
from forum_service.core.database.filters import (
    ComparisonFilter,
    FilterGroup,
    KeysetFilter,
    Limit,
    OrderBy,
    StatementFilter,
)
from forum_service.core.database.repository import BaseRepository
from forum_service.core.database.utils import (
    OBJECT_ID_PATTERN,
    generate_object_id,
    is_object_id,
    normalize_object_id,
)

__all__ = [
    "NAMING_CONVENTION",
    "OBJECT_ID_PATTERN",
    "Base",
    "BaseRepository",
    "ComparisonFilter",
    "FilterGroup",
    "ForumBase",
    "InvalidFilterError",
    "KeysetFilter",
    "Limit",
    "NotFoundError",
    "ObjectIdPKMixin",
    "OrderBy",
    "RepositoryError",
    "SoftDeleteMixin",
    "StatementFilter",
    "TimestampMixin",
    "generate_object_id",
    "is_object_id",
    "normalize_object_id",
    "utcnow",
]
