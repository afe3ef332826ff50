"""Query filtering utilities for SQLAlchemy.

These filters work directly with SQLAlchemy statements without hiding the
query. They're utility helpers, not an abstraction layer.

Usage:
    from sqlalchemy import select
    from forum_service.core.database.filters import ComparisonFilter, OrderBy, Limit

    stmt = select(Post)
    stmt = ComparisonFilter(Post.deleted_at, "is_null").apply(stmt)
    stmt = OrderBy([Post.created_at, Post.id], "desc").apply(stmt)
    stmt = Limit(25).apply(stmt)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Literal

from sqlalchemy import Select, and_, or_

if TYPE_CHECKING:
    from sqlalchemy.orm import InstrumentedAttribute

ComparisonOperator = Literal["eq", "ne", "lt", "lte", "gt", "gte", "is_null", "not_null"]

COMPARISON_OPERATORS: frozenset[str] = frozenset(
    {"eq", "ne", "lt", "lte", "gt", "gte", "is_null", "not_null"}
)


class StatementFilter(ABC):
    """Base class for statement filters.

    All filters implement `apply()` which modifies a SQLAlchemy statement.
    """

    @abstractmethod
    def apply(self, statement: Select[Any]) -> Select[Any]:
        """Apply filter to statement."""
        ...


class ComparisonFilter(StatementFilter):
    """Single-column comparison.

    Example:
        stmt = ComparisonFilter(Post.created_at, "gte", since).apply(stmt)
        # WHERE posts.created_at >= :since

        stmt = ComparisonFilter(Post.deleted_at, "is_null").apply(stmt)
        # WHERE posts.deleted_at IS NULL
    """

    def __init__(
        self,
        field: InstrumentedAttribute[Any],
        operator: ComparisonOperator,
        value: Any = None,
    ):
        if operator not in COMPARISON_OPERATORS:
            msg = f"Unsupported comparison operator: {operator!r}"
            raise ValueError(msg)
        self.field = field
        self.operator = operator
        self.value = value

    def clause(self) -> Any:
        """The boolean SQL expression of this comparison."""
        field, value = self.field, self.value
        match self.operator:
            case "eq":
                clause = field == value
            case "ne":
                clause = field != value
            case "lt":
                clause = field < value
            case "lte":
                clause = field <= value
            case "gt":
                clause = field > value
            case "gte":
                clause = field >= value
            case "is_null":
                clause = field.is_(None)
            case _:
                clause = field.is_not(None)
        return clause

    def apply(self, statement: Select[Any]) -> Select[Any]:
        """Apply comparison to statement."""
        return statement.where(self.clause())


class KeysetFilter(StatementFilter):
    """Keyset bound over a sort column plus a unique tiebreaker column.

    Rows sharing the anchor's sort value are split by the tiebreaker, so
    paging through ties neither skips nor repeats rows.

    Example:
        stmt = KeysetFilter(
            ComparisonFilter(Comment.number_of_votes, "lt", 7),
            ComparisonFilter(Comment.id, "lt", anchor_id),
        ).apply(stmt)
        # WHERE votes < 7 OR (votes = 7 AND id < :anchor_id)
    """

    def __init__(self, primary: ComparisonFilter, tiebreak: ComparisonFilter):
        self.primary = primary
        self.tiebreak = tiebreak

    def apply(self, statement: Select[Any]) -> Select[Any]:
        """Apply keyset bound to statement."""
        tied = and_(self.primary.field == self.primary.value, self.tiebreak.clause())
        return statement.where(or_(self.primary.clause(), tied))


class OrderBy(StatementFilter):
    """Column ordering/sorting.

    Example:
        stmt = OrderBy(Post.created_at, "desc").apply(stmt)

        # Multiple orderings
        stmt = OrderBy([Post.score, Post.id], ["desc", "desc"]).apply(stmt)
    """

    def __init__(
        self,
        fields: InstrumentedAttribute[Any] | Sequence[InstrumentedAttribute[Any]],
        sort_order: Literal["asc", "desc"] | Sequence[Literal["asc", "desc"]] = "asc",
    ):
        self.fields = [fields] if not isinstance(fields, Sequence) else list(fields)

        if isinstance(sort_order, str):
            self.sort_orders = [sort_order] * len(self.fields)
        else:
            self.sort_orders = list(sort_order)
            if len(self.sort_orders) != len(self.fields):
                msg = "sort_order length must match fields length"
                raise ValueError(msg)

    def apply(self, statement: Select[Any]) -> Select[Any]:
        """Apply ordering to statement."""
        for field, order in zip(self.fields, self.sort_orders, strict=True):
            if order == "desc":
                statement = statement.order_by(field.desc())
            else:
                statement = statement.order_by(field.asc())
        return statement


class Limit(StatementFilter):
    """Cap the number of returned rows."""

    def __init__(self, limit: int):
        self.limit = limit

    def apply(self, statement: Select[Any]) -> Select[Any]:
        return statement.limit(self.limit)


class FilterGroup(StatementFilter):
    """Apply several filters in order (AND semantics).

    Example:
        stmt = FilterGroup([
            ComparisonFilter(Post.subreddit_id, "eq", subreddit.id),
            ComparisonFilter(Post.deleted_at, "is_null"),
        ]).apply(stmt)
    """

    def __init__(self, filters: Sequence[StatementFilter]):
        self.filters = list(filters)

    def apply(self, statement: Select[Any]) -> Select[Any]:
        for filter_obj in self.filters:
            statement = filter_obj.apply(statement)
        return statement


__all__ = [
    "COMPARISON_OPERATORS",
    "ComparisonFilter",
    "ComparisonOperator",
    "FilterGroup",
    "KeysetFilter",
    "Limit",
    "OrderBy",
    "StatementFilter",
]
