"""Store-agnostic listing predicates.

A :class:`ListingFilter` is an AND of :class:`Condition` objects keyed by
field. Adding a condition on a field that already has one replaces it, which
is how the cursor bound overrides whatever the base filter said about the
same field.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Literal

Operator = Literal["eq", "is_null", "not_null", "lt", "gt", "gte", "lte"]


@dataclass(frozen=True, slots=True)
class Condition:
    """One ``field <operator> value`` comparison.

    ``tiebreak`` turns an ``lt``/``gt`` bound into a keyset bound: rows equal
    to ``value`` on ``field`` are kept when they also satisfy ``tiebreak``.
    """

    field: str
    operator: Operator
    value: Any = None
    tiebreak: Condition | None = None

    @classmethod
    def is_null(cls, field: str) -> Condition:
        return cls(field, "is_null")

    @classmethod
    def not_null(cls, field: str) -> Condition:
        return cls(field, "not_null")

    @classmethod
    def eq(cls, field: str, value: Any) -> Condition:
        return cls(field, "eq", value)


NOT_DELETED = Condition.is_null("deleted_at")


@dataclass(frozen=True, slots=True)
class ListingFilter:
    """Immutable conjunction of conditions, at most one per field."""

    conditions: tuple[Condition, ...] = ()

    @classmethod
    def of(cls, *conditions: Condition) -> ListingFilter:
        return cls().merge(*conditions)

    def merge(self, *conditions: Condition) -> ListingFilter:
        """Return a new filter where each given condition replaces any on its field."""
        by_field = {condition.field: condition for condition in self.conditions}
        for condition in conditions:
            by_field.pop(condition.field, None)
            by_field[condition.field] = condition
        return ListingFilter(tuple(by_field.values()))

    def extend(self, other: ListingFilter | None) -> ListingFilter:
        if other is None:
            return self
        return self.merge(*other.conditions)

    def get(self, field: str) -> Condition | None:
        for condition in self.conditions:
            if condition.field == field:
                return condition
        return None

    def __iter__(self) -> Iterator[Condition]:
        return iter(self.conditions)

    def __len__(self) -> int:
        return len(self.conditions)

    def __contains__(self, field: object) -> bool:
        return any(condition.field == field for condition in self.conditions)


def read_field(item: Any, field: str) -> Any:
    """Read ``field`` from an ORM object or a mapping."""
    if isinstance(item, Mapping):
        return item.get(field)
    return getattr(item, field, None)


def _describe_one(c: Condition) -> str:
    if c.operator in {"is_null", "not_null"}:
        return f"{c.field} {c.operator}"
    text = f"{c.field} {c.operator} {c.value!r}"
    if c.tiebreak is not None:
        text = f"({text} OR tie on {_describe_one(c.tiebreak)})"
    return text


def describe(conditions: Iterable[Condition]) -> str:
    """Compact text form for debug logs."""
    return " AND ".join(_describe_one(c) for c in conditions)


__all__ = [
    "NOT_DELETED",
    "Condition",
    "ListingFilter",
    "Operator",
    "describe",
    "read_field",
]
