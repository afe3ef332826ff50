"""Query-string pagination parameters shared by every listing endpoint."""

from __future__ import annotations

from typing import Annotated

from fastapi import Query

from forum_service.core.listing import ListingParams


async def get_listing_params(
    sort: Annotated[str | None, Query(description="new|old|hot|top|best")] = None,
    time: Annotated[str | None, Query(description="hour|day|week|month|year, with sort=top")] = None,
    before: Annotated[str | None, Query(description="Id of the first item of the next page up")] = None,
    after: Annotated[str | None, Query(description="Id of the last item of the previous page")] = None,
    limit: Annotated[str | None, Query(description="Page size, clamped to [1, 100]")] = None,
) -> ListingParams:
    """Collect raw listing params without validating them.

    ``limit`` is accepted as text so that values like ``"abc"`` fall back to the
    default page size instead of failing request validation.
    """
    return ListingParams(sort=sort, time=time, before=before, after=after, limit=limit)
