"""SQLAlchemy adapter for the listing engine.

Translates the engine's :class:`ListingFilter`, :class:`SortOrder` and limit
into a ``select()`` on one model, using the statement filters from
``forum_service.core.database.filters``.

Example:
    store = SQLAlchemyListingStore(
        session,
        Post,
        scope=[ComparisonFilter(Post.subreddit_id, "eq", subreddit.id)],
    )
    page = await run_listing(POST, params, store)
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from sqlalchemy import select

from forum_service.core.database.exceptions import InvalidFilterError
from forum_service.core.database.filters import (
    ComparisonFilter,
    FilterGroup,
    KeysetFilter,
    Limit,
    OrderBy,
    StatementFilter,
)
from forum_service.core.listing.ranking import DEFAULT_RANKING, RankingStrategy
from forum_service.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from sqlalchemy import Select
    from sqlalchemy.ext.asyncio import AsyncSession
    from sqlalchemy.orm import InstrumentedAttribute

    from forum_service.core.listing.filters import Condition, ListingFilter
    from forum_service.core.listing.spec import SortOrder

lazy_logger = get_lazy_logger(__name__)


class SQLAlchemyListingStore[T]:
    """Id lookup and ordered fetch over one mapped model.

    Args:
        session: Request-scoped async session.
        model: Mapped class being listed.
        scope: Statement filters applied to every fetch (e.g. the subreddit).
        ranking: Ordering used when the query spec has no sort order.
        id_field: Primary-key attribute, also the ordering tiebreaker.
    """

    def __init__(
        self,
        session: AsyncSession,
        model: type[T],
        *,
        scope: Sequence[StatementFilter] = (),
        ranking: RankingStrategy = DEFAULT_RANKING,
        id_field: str = "id",
    ) -> None:
        self.session = session
        self.model = model
        self.scope = FilterGroup(scope)
        self.ranking = ranking
        self.id_field = id_field

    def _column(self, name: str) -> InstrumentedAttribute[Any]:
        column = getattr(self.model, name, None)
        if column is None:
            msg = f"{self.model.__name__} has no field {name!r}"
            raise InvalidFilterError(msg, filter_name=name)
        return column

    async def get_by_id(self, item_id: str) -> T | None:
        """Primary-key lookup; soft-deleted rows are returned as well."""
        stmt = select(self.model).where(self._column(self.id_field) == item_id)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    def _comparison(self, condition: Condition) -> ComparisonFilter:
        return ComparisonFilter(
            self._column(condition.field),
            condition.operator,
            condition.value,
        )

    def _filter_for(self, condition: Condition) -> StatementFilter:
        if condition.tiebreak is None:
            return self._comparison(condition)
        return KeysetFilter(self._comparison(condition), self._comparison(condition.tiebreak))

    def build_statement(
        self,
        listing_filter: ListingFilter,
        sort_order: SortOrder | None,
        limit: int,
    ) -> Select[Any]:
        stmt = self.scope.apply(select(self.model))
        for condition in listing_filter:
            stmt = self._filter_for(condition).apply(stmt)

        if sort_order is None:
            stmt = self.ranking.apply(stmt, self.model)
        else:
            stmt = OrderBy(
                [self._column(sort_order.field), self._column(self.id_field)],
                sort_order.direction,
            ).apply(stmt)
        return Limit(limit).apply(stmt)

    async def fetch(
        self,
        listing_filter: ListingFilter,
        sort_order: SortOrder | None,
        limit: int,
    ) -> Sequence[T]:
        """Run the listing query and return rows in display order."""
        stmt = self.build_statement(listing_filter, sort_order, limit)
        result = await self.session.execute(stmt)
        rows = result.scalars().all()

        lazy_logger.debug(
            lambda: f"store.fetch: {self.model.__name__}(order={sort_order}, limit={limit}) -> {len(rows)} rows"
        )
        return rows


__all__ = ["SQLAlchemyListingStore"]
