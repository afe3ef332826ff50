"""API router for the users feature.

Endpoints:
    GET /users/me/blocked - Users the viewer blocked (id order)
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from forum_service.core.dependencies import get_db_session, get_listing_params, get_viewer_id
from forum_service.core.listing import ListingParams
from forum_service.core.schemas import ListingResponse
from forum_service.features.users.service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "/me/blocked",
    response_model=ListingResponse,
    summary="List blocked users",
    description="Return the users blocked by the viewer identified by the X-User-Id header.",
)
async def list_blocked_users(
    session: Annotated[AsyncSession, Depends(get_db_session)],
    params: Annotated[ListingParams, Depends(get_listing_params)],
    viewer_id: Annotated[str | None, Depends(get_viewer_id)],
) -> dict:
    page = await UserService(session).list_blocked_users(viewer_id, params)
    return page.to_dict()
