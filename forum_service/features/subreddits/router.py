"""API router for a subreddit's about pages.

Endpoints:
    GET /r/{subreddit}/about/moderators - Moderators (id order)
    GET /r/{subreddit}/about/banned     - Banned users (id order)
    GET /r/{subreddit}/about/{category} - Moderation queue: spam | unmoderated | edited
                                          (``only=posts`` by default, or ``only=comments``)

The fixed paths are declared before ``{category}`` so they win the match.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from forum_service.core.dependencies import get_db_session, get_listing_params, get_viewer_id
from forum_service.core.exceptions import BadRequestException
from forum_service.core.listing import ItemCategory, ListingParams
from forum_service.core.schemas import ListingResponse
from forum_service.features.comments.service import CommentService
from forum_service.features.posts.service import PostService
from forum_service.features.subreddits.service import SubredditService

router = APIRouter(prefix="/r", tags=["subreddits"])


class ItemType(StrEnum):
    POSTS = "posts"
    COMMENTS = "comments"


@router.get(
    "/{subreddit}/about/moderators",
    response_model=ListingResponse,
    summary="List subreddit moderators",
)
async def list_moderators(
    subreddit: str,
    session: Annotated[AsyncSession, Depends(get_db_session)],
    params: Annotated[ListingParams, Depends(get_listing_params)],
) -> dict:
    page = await SubredditService(session).list_moderators(subreddit, params)
    return page.to_dict()


@router.get(
    "/{subreddit}/about/banned",
    response_model=ListingResponse,
    summary="List banned users",
)
async def list_banned_users(
    subreddit: str,
    session: Annotated[AsyncSession, Depends(get_db_session)],
    params: Annotated[ListingParams, Depends(get_listing_params)],
) -> dict:
    page = await SubredditService(session).list_banned_users(subreddit, params)
    return page.to_dict()


def _parse_choice[E: StrEnum](enum: type[E], value: str, what: str) -> E:
    try:
        return enum(value)
    except ValueError:
        choices = ", ".join(member.value for member in enum)
        raise BadRequestException(
            detail=f"Invalid {what} {value!r}, expected one of: {choices}",
            type=f"invalid-{what.replace(' ', '-')}",
        ) from None


@router.get(
    "/{subreddit}/about/{category}",
    response_model=ListingResponse,
    summary="List a moderation queue",
    description="Posts or comments of a subreddit that are spammed, unmoderated or edited.",
)
async def list_moderation_queue(
    subreddit: str,
    category: str,
    session: Annotated[AsyncSession, Depends(get_db_session)],
    params: Annotated[ListingParams, Depends(get_listing_params)],
    viewer_id: Annotated[str | None, Depends(get_viewer_id)],
    only: Annotated[str, Query(description="posts|comments")] = ItemType.POSTS,
) -> dict:
    queue = _parse_choice(ItemCategory, category, "category")
    item_type = _parse_choice(ItemType, only, "item type")

    if item_type == ItemType.COMMENTS:
        page = await CommentService(session).list_subreddit_comments(
            subreddit, params, viewer_id=viewer_id, category=queue
        )
    else:
        page = await PostService(session).list_subreddit_posts(
            subreddit, params, viewer_id=viewer_id, category=queue
        )
    return page.to_dict()
