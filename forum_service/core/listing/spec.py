"""Listing spec builder.

Turns untrusted :class:`ListingParams` into a :class:`QuerySpec`: the sort
order, the field cursors compare on, an optional time bound and a clamped
page size. Every function here is pure and never raises; anything it does
not recognize falls back to the entity kind's defaults.

Example:
    spec = build_spec(ListingParams(sort="top", time="day"), POST, now=now)
    assert spec.sort_order is None
    assert spec.time_filter == now - timedelta(days=1)
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any, Literal

from dateutil.relativedelta import relativedelta

from forum_service.core.listing.params import ListingParams, Sort, TimeWindow

if TYPE_CHECKING:
    from forum_service.core.listing.kinds import EntityKind
    from forum_service.core.settings.listing import ListingSettings

SortDirection = Literal["asc", "desc"]

_INTEGER_PREFIX = re.compile(r"^\s*([+-]?\d+)")

_TIME_WINDOWS: dict[TimeWindow, timedelta | relativedelta] = {
    TimeWindow.HOUR: timedelta(hours=1),
    TimeWindow.DAY: timedelta(days=1),
    TimeWindow.WEEK: timedelta(days=7),
    TimeWindow.MONTH: relativedelta(months=1),
    TimeWindow.YEAR: relativedelta(years=1),
}


@dataclass(frozen=True, slots=True)
class SortOrder:
    """A single ordering field and its direction."""

    field: str
    direction: SortDirection = "desc"

    @property
    def descending(self) -> bool:
        return self.direction == "desc"


@dataclass(frozen=True, slots=True)
class QuerySpec:
    """Normalized listing query.

    Attributes:
        sort_order: Field ordering, or None when the store must rank on its own
            (``sort=top`` and kinds without sort keys).
        time_filter: Inclusive lower bound on ``created_at``, or None.
        limit: Page size, always within the configured bounds.
    """

    sort_order: SortOrder | None
    time_filter: datetime | None
    limit: int

    @property
    def sort_field(self) -> str | None:
        """Field cursors compare on; None means compare identifiers."""
        return self.sort_order.field if self.sort_order is not None else None


def parse_limit(raw: Any, settings: ListingSettings | None = None) -> int:
    """Resolve the ``limit`` parameter.

    Absent, empty or non-numeric input yields the default page size. Strings
    are read up to the first non-digit (``"30abc"`` is 30), floats truncate,
    and the result is clamped to ``[min_limit, max_limit]``.
    """
    if settings is None:
        from forum_service.core.settings import get_listing_settings

        settings = get_listing_settings()

    value = _parse_integer(raw)
    if value is None:
        return settings.default_limit
    if value > settings.max_limit:
        return settings.max_limit
    if value < settings.min_limit:
        return settings.min_limit
    return value


def _parse_integer(raw: Any) -> int | None:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if math.isnan(raw):
            return None
        if math.isinf(raw):
            return None if raw < 0 else 2**31
        return int(raw)
    match = _INTEGER_PREFIX.match(str(raw))
    if match is None:
        return None
    return int(match.group(1))


def resolve_time_filter(time: str | None, now: datetime) -> datetime | None:
    """Lower bound for ``sort=top`` listings; None for absent or unknown windows."""
    if not time:
        return None
    try:
        window = TimeWindow(time.strip().lower())
    except ValueError:
        return None
    return now - _TIME_WINDOWS[window]


def resolve_sort(sort: str | None, kind: EntityKind) -> tuple[SortOrder | None, bool]:
    """Look ``sort`` up in the kind's sort table.

    Returns:
        ``(sort_order, is_top)``. Unknown keys and keys the kind does not offer
        fall back to the kind's default order.
    """
    key = sort.strip().lower() if sort else ""
    if key == Sort.TOP and Sort.TOP in kind.sort_keys:
        return None, True
    if key and key in kind.sort_keys:
        return kind.sort_keys[key], False
    return kind.default_sort, False


def build_spec(
    params: ListingParams,
    kind: EntityKind,
    *,
    now: datetime | None = None,
    settings: ListingSettings | None = None,
) -> QuerySpec:
    """Build the query spec for one listing request.

    The time window is only consulted for ``sort=top``; any other sort ignores it.
    """
    sort_order, is_top = resolve_sort(params.sort, kind)
    time_filter = None
    if is_top:
        time_filter = resolve_time_filter(params.time, now or datetime.now(UTC))
    return QuerySpec(
        sort_order=sort_order,
        time_filter=time_filter,
        limit=parse_limit(params.limit, settings),
    )


__all__ = [
    "QuerySpec",
    "SortDirection",
    "SortOrder",
    "build_spec",
    "parse_limit",
    "resolve_sort",
    "resolve_time_filter",
]
