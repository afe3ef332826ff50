"""Ranking strategies for listings without a field-based sort order.

``sort=top`` and the user-kind listings carry no sort order; the store asks a
:class:`RankingStrategy` how to order those rows instead. No scoring formula
is defined for ``top``: the default strategy keeps insertion order, which
also matches the ``id < anchor`` / ``id > anchor`` cursor those listings use.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sqlalchemy import Select


@runtime_checkable
class RankingStrategy(Protocol):
    """Orders a statement when the query spec has no sort order."""

    def apply(self, statement: Select[Any], model: type[Any]) -> Select[Any]: ...


class IdentifierRanking:
    """Order by identifier, ascending (oldest first)."""

    def __init__(self, id_field: str = "id") -> None:
        self.id_field = id_field

    def apply(self, statement: Select[Any], model: type[Any]) -> Select[Any]:
        return statement.order_by(getattr(model, self.id_field).asc())

    def __repr__(self) -> str:
        return f"IdentifierRanking(id_field={self.id_field!r})"


DEFAULT_RANKING: RankingStrategy = IdentifierRanking()

__all__ = ["DEFAULT_RANKING", "IdentifierRanking", "RankingStrategy"]
