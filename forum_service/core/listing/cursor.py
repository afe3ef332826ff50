"""Cursor resolver.

Converts a ``before``/``after`` anchor id into a comparison on the listing's
sort field so the store only returns the correct side of the anchor.

Resolution is lenient on purpose: apart from supplying both anchors at once,
every unusable anchor (absent, malformed, unknown, soft-deleted) takes the
single :class:`AnchorFallback` path and the request is served as a first page.

Inequality table (``V`` is the anchor's value of the sort field ``F``):

    ==========  ==========  ==========
    anchor      desc        asc
    ==========  ==========  ==========
    before      F > V       F < V
    after       F < V       F > V
    ==========  ==========  ==========

Rows tied with the anchor on ``F`` are split by identifier with the same
operator, so ``after`` on a descending sort really reads
``F < V OR (F = V AND id < anchor)``. Without a sort order the identifier
itself is compared: ``before`` gives ``id < anchor`` and ``after`` gives
``id > anchor``.

A ``before`` page is not the page adjacent to the anchor. The store keeps the
listing's own order, so ``before`` returns the first ``limit`` items of that
order that precede the anchor, starting from the top of the listing.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any, Literal

from forum_service.core.database.utils import is_object_id, normalize_object_id
from forum_service.core.exceptions import BadRequestException
from forum_service.core.listing.filters import Condition, read_field
from forum_service.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from forum_service.core.listing.spec import QuerySpec

logger = logging.getLogger(__name__)
lazy_logger = get_lazy_logger(__name__)

IdLookup = Callable[[str], Awaitable[Any | None]]
AnchorSide = Literal["before", "after"]


class FallbackReason(StrEnum):
    """Why an anchor was dropped."""

    ABSENT = "absent"
    MALFORMED = "malformed"
    MISSING = "missing"
    DELETED = "deleted"


@dataclass(frozen=True, slots=True)
class CursorFilter:
    """Comparison that keeps one side of the anchor.

    ``tiebreak`` is the ``(id_field, anchor_id)`` pair that orders rows equal
    to ``value``; it is compared with the same operator.
    """

    field: str
    operator: Literal["lt", "gt"]
    value: Any
    tiebreak: tuple[str, str] | None = None

    def as_condition(self) -> Condition:
        tiebreak = None
        if self.tiebreak is not None:
            tie_field, tie_value = self.tiebreak
            tiebreak = Condition(tie_field, self.operator, tie_value)
        return Condition(self.field, self.operator, self.value, tiebreak)


@dataclass(frozen=True, slots=True)
class AnchorFallback:
    """An anchor that cannot be used; the listing continues as a first page."""

    reason: FallbackReason
    side: AnchorSide | None = None
    anchor: str | None = None

    def resolve(self) -> None:
        lazy_logger.debug(
            lambda: f"cursor.fallback: reason={self.reason.value} side={self.side} anchor={self.anchor!r}"
        )


async def resolve_anchor(
    spec: QuerySpec,
    before: str | None,
    after: str | None,
    lookup: IdLookup,
    *,
    id_field: str = "id",
) -> CursorFilter | None:
    """Resolve the anchor of a listing request into a cursor filter.

    Args:
        spec: Query spec produced by ``build_spec``.
        before: Id of the item the page should end before.
        after: Id of the item the page should start after.
        lookup: Async primary-key lookup; must return soft-deleted rows too.
        id_field: Field compared when the query spec has no sort order, and
            the tiebreaker for rows tied with the anchor otherwise.

    Returns:
        The cursor filter, or None for first-page semantics.

    Raises:
        BadRequestException: Both ``before`` and ``after`` were supplied.
    """
    if before and after:
        logger.info(
            "Rejected listing with conflicting cursors",
            extra={"before": before, "after": after},
        )
        raise BadRequestException(
            detail="conflicting cursors",
            type="conflicting-cursors",
        )

    side: AnchorSide
    if before:
        side, anchor = "before", before
    elif after:
        side, anchor = "after", after
    else:
        return AnchorFallback(FallbackReason.ABSENT).resolve()

    if not is_object_id(anchor):
        return AnchorFallback(FallbackReason.MALFORMED, side, anchor).resolve()

    anchor = normalize_object_id(anchor)
    item = await lookup(anchor)
    if item is None:
        return AnchorFallback(FallbackReason.MISSING, side, anchor).resolve()
    if read_field(item, "deleted_at") is not None:
        return AnchorFallback(FallbackReason.DELETED, side, anchor).resolve()

    sort_order = spec.sort_order
    if sort_order is None:
        operator: Literal["lt", "gt"] = "lt" if side == "before" else "gt"
        cursor = CursorFilter(id_field, operator, anchor)
    else:
        # before/desc and after/asc both keep values above the anchor
        keeps_greater = (side == "before") == sort_order.descending
        cursor = CursorFilter(
            sort_order.field,
            "gt" if keeps_greater else "lt",
            read_field(item, sort_order.field),
            tiebreak=(id_field, anchor),
        )

    lazy_logger.debug(
        lambda: f"cursor.resolved: {side}={anchor} -> {cursor.field} {cursor.operator} {cursor.value!r}"
    )
    return cursor


__all__ = [
    "AnchorFallback",
    "AnchorSide",
    "CursorFilter",
    "FallbackReason",
    "IdLookup",
    "resolve_anchor",
]
