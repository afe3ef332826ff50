"""The listing pipeline shared by every listing endpoint.

spec builder -> cursor resolver (store lookup) -> store fetch -> page assembler
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from forum_service.core.listing.cursor import resolve_anchor
from forum_service.core.listing.page import Page, assemble_page
from forum_service.core.listing.spec import build_spec
from forum_service.infra.logging import get_lazy_logger

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime

    from forum_service.core.listing.filters import ListingFilter
    from forum_service.core.listing.kinds import EntityKind
    from forum_service.core.listing.params import ListingParams
    from forum_service.core.listing.spec import SortOrder
    from forum_service.core.listing.viewer import ViewerState
    from forum_service.core.settings.listing import ListingSettings

lazy_logger = get_lazy_logger(__name__)


class ListingStore(Protocol):
    """What the engine needs from a backing collection."""

    async def get_by_id(self, item_id: str) -> Any | None: ...

    async def fetch(
        self,
        listing_filter: ListingFilter,
        sort_order: SortOrder | None,
        limit: int,
    ) -> Sequence[Any]: ...


async def run_listing(
    kind: EntityKind,
    params: ListingParams,
    store: ListingStore,
    *,
    base_filter: ListingFilter | None = None,
    viewer: ViewerState | None = None,
    now: datetime | None = None,
    settings: ListingSettings | None = None,
) -> Page:
    """List one page of ``kind`` from ``store``.

    Args:
        kind: Entity-kind descriptor (sort table, shaping, decoration).
        params: Raw pagination parameters.
        store: Lookup and fetch provider.
        base_filter: Call-site conditions merged over the kind's own.
        viewer: Requesting user for vote decoration; None is anonymous.
        now: Clock used for ``sort=top`` time windows.
        settings: Page-size bounds, defaults to the cached listing settings.

    Raises:
        BadRequestException: Both ``before`` and ``after`` were supplied.
    """
    spec = build_spec(params, kind, now=now, settings=settings)
    cursor = await resolve_anchor(
        spec,
        params.before,
        params.after,
        store.get_by_id,
        id_field=kind.id_field,
    )
    listing_filter = kind.base_filter().extend(base_filter)

    page = await assemble_page(
        listing_filter,
        spec,
        cursor,
        store.fetch,
        shape=kind.shape,
        viewer=viewer,
        decorate=kind.decorate,
    )

    lazy_logger.debug(
        lambda: f"listing.{kind.name}: sort={spec.sort_order} limit={spec.limit} "
        f"cursor={'yes' if cursor else 'no'} -> {len(page.children)} items"
    )
    return page


__all__ = ["ListingStore", "run_listing"]
