"""Page assembler.

Merges the base filter with the cursor filter, runs the store fetch, shapes
each row and computes the ``before``/``after`` cursors of the page.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from forum_service.core.listing.filters import NOT_DELETED, Condition, ListingFilter, describe
from forum_service.core.listing.spec import QuerySpec, SortOrder
from forum_service.core.listing.viewer import ViewerState
from forum_service.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from forum_service.core.listing.cursor import CursorFilter

lazy_logger = get_lazy_logger(__name__)

TIME_FIELD = "created_at"


@dataclass(frozen=True, slots=True)
class PageChild:
    """One shaped item: its id plus the kind-specific public fields."""

    id: str
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "data": self.data}


@dataclass(frozen=True, slots=True)
class Page:
    """Ordered page of shaped items with the cursors for its neighbours."""

    children: tuple[PageChild, ...] = ()
    before: str = ""
    after: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.children

    def to_dict(self) -> dict[str, Any]:
        return {
            "after": self.after,
            "before": self.before,
            "children": [child.to_dict() for child in self.children],
        }


Fetch = Callable[[ListingFilter, SortOrder | None, int], Awaitable[Sequence[Any]]]
Shape = Callable[[Any], PageChild]
Decorate = Callable[[PageChild, ViewerState | None], PageChild]


def merge_filters(
    base_filter: ListingFilter | None,
    spec: QuerySpec,
    cursor_filter: CursorFilter | None,
) -> ListingFilter:
    """Combine base filter, time window and cursor into one predicate.

    Soft-deleted rows are always excluded. The cursor condition is merged last
    and replaces any condition already present on its field.
    """
    merged = ListingFilter().extend(base_filter).merge(NOT_DELETED)
    if spec.time_filter is not None:
        merged = merged.merge(Condition(TIME_FIELD, "gte", spec.time_filter))
    if cursor_filter is not None:
        merged = merged.merge(cursor_filter.as_condition())
    return merged


def decorate_votes(child: PageChild, viewer: ViewerState | None) -> PageChild:
    """Add the viewer's ``vote`` and ``saved`` state to a shaped item."""
    if viewer is None:
        vote, saved = 0, False
    else:
        vote, saved = viewer.vote_for(child.id), viewer.has_saved(child.id)
    return PageChild(child.id, {**child.data, "saved": saved, "vote": vote})


async def assemble_page(
    base_filter: ListingFilter | None,
    spec: QuerySpec,
    cursor_filter: CursorFilter | None,
    fetch: Fetch,
    *,
    shape: Shape,
    viewer: ViewerState | None = None,
    decorate: Decorate | None = None,
) -> Page:
    """Fetch and shape one page.

    Args:
        base_filter: Kind and call-site conditions.
        spec: Query spec with sort order, time window and limit.
        cursor_filter: Resolved anchor bound, or None for a first page.
        fetch: ``await fetch(filter, sort_order, limit)`` returning rows in order.
        shape: Turns a row into a :class:`PageChild`.
        viewer: Requesting user, None for anonymous requests.
        decorate: Adds viewer-specific fields; None leaves items untouched.

    Returns:
        The page; ``before``/``after`` are the first/last ids, or "" when empty.
    """
    listing_filter = merge_filters(base_filter, spec, cursor_filter)
    lazy_logger.debug(
        lambda: f"page.fetch: where {describe(listing_filter)} order={spec.sort_order} limit={spec.limit}"
    )

    rows = await fetch(listing_filter, spec.sort_order, spec.limit)

    children = []
    for row in rows:
        child = shape(row)
        if decorate is not None:
            child = decorate(child, viewer)
        children.append(child)

    if not children:
        return Page()
    return Page(children=tuple(children), before=children[0].id, after=children[-1].id)


__all__ = [
    "Decorate",
    "Fetch",
    "Page",
    "PageChild",
    "Shape",
    "assemble_page",
    "decorate_votes",
    "merge_filters",
]
