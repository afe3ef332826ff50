"""FastAPI dependencies shared across features."""

from forum_service.core.dependencies.database import get_db_session
from forum_service.core.dependencies.listing import get_listing_params
from forum_service.core.dependencies.viewer import VIEWER_HEADER, get_viewer_id

__all__ = ["VIEWER_HEADER", "get_db_session", "get_listing_params", "get_viewer_id"]
