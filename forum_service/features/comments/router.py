"""API routers for the comments feature.

Endpoints:
    GET /comments/{post_id}     - Comments on a post (default: most voted first)
    GET /r/{subreddit}/comments - Comments of a subreddit
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from forum_service.core.dependencies import get_db_session, get_listing_params, get_viewer_id
from forum_service.core.listing import ListingParams
from forum_service.core.schemas import ListingResponse
from forum_service.features.comments.service import CommentService

router = APIRouter(prefix="/comments", tags=["comments"])


@router.get(
    "/{post_id}",
    response_model=ListingResponse,
    summary="List comments on a post",
)
async def list_post_comments(
    post_id: str,
    session: Annotated[AsyncSession, Depends(get_db_session)],
    params: Annotated[ListingParams, Depends(get_listing_params)],
    viewer_id: Annotated[str | None, Depends(get_viewer_id)],
) -> dict:
    page = await CommentService(session).list_post_comments(post_id, params, viewer_id=viewer_id)
    return page.to_dict()


subreddit_router = APIRouter(prefix="/r", tags=["comments"])


@subreddit_router.get(
    "/{subreddit}/comments",
    response_model=ListingResponse,
    summary="List subreddit comments",
)
async def list_subreddit_comments(
    subreddit: str,
    session: Annotated[AsyncSession, Depends(get_db_session)],
    params: Annotated[ListingParams, Depends(get_listing_params)],
    viewer_id: Annotated[str | None, Depends(get_viewer_id)],
) -> dict:
    page = await CommentService(session).list_subreddit_comments(
        subreddit, params, viewer_id=viewer_id
    )
    return page.to_dict()
