"""API router for subreddit post listings.

Endpoints:
    GET /r/{subreddit}/posts - Posts of a subreddit (sort: best|new|old|hot|top)
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from forum_service.core.dependencies import get_db_session, get_listing_params, get_viewer_id
from forum_service.core.listing import ListingParams
from forum_service.core.schemas import ListingResponse
from forum_service.features.posts.service import PostService

router = APIRouter(prefix="/r", tags=["posts"])


@router.get(
    "/{subreddit}/posts",
    response_model=ListingResponse,
    summary="List subreddit posts",
    description="Cursor-paginated posts of a subreddit with the viewer's vote and saved state.",
)
async def list_subreddit_posts(
    subreddit: str,
    session: Annotated[AsyncSession, Depends(get_db_session)],
    params: Annotated[ListingParams, Depends(get_listing_params)],
    viewer_id: Annotated[str | None, Depends(get_viewer_id)],
) -> dict:
    page = await PostService(session).list_subreddit_posts(subreddit, params, viewer_id=viewer_id)
    return page.to_dict()
