"""Viewer identification.

Authentication happens upstream; the gateway forwards the caller's user id in
the ``X-User-Id`` header. A missing or malformed id means an anonymous viewer.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Header

from forum_service.core.database.utils import is_object_id, normalize_object_id

VIEWER_HEADER = "X-User-Id"


async def get_viewer_id(
    x_user_id: Annotated[str | None, Header(alias=VIEWER_HEADER)] = None,
) -> str | None:
    """Return the viewer's user id, or None for anonymous requests."""
    if x_user_id is None:
        return None
    candidate = x_user_id.strip()
    if not is_object_id(candidate):
        return None
    return normalize_object_id(candidate)
