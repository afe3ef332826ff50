"""Cursor-based listing engine.

Usage:
    from forum_service.core.listing import POST, ListingParams, SQLAlchemyListingStore, run_listing

    store = SQLAlchemyListingStore(session, Post, scope=[...])
    page = await run_listing(POST, ListingParams(sort="new", after=last_id), store)
    return page.to_dict()
"""

from forum_service.core.listing.cursor import (
    AnchorFallback,
    CursorFilter,
    FallbackReason,
    resolve_anchor,
)
from forum_service.core.listing.engine import ListingStore, run_listing
from forum_service.core.listing.filters import NOT_DELETED, Condition, ListingFilter
from forum_service.core.listing.kinds import (
    BANNED_USER,
    BLOCKED_USER,
    COMMENT,
    COMMENT_CATEGORIES,
    MODERATOR,
    POST,
    POST_CATEGORIES,
    THREAD_COMMENT,
    EntityKind,
    ItemCategory,
)
from forum_service.core.listing.page import Page, PageChild, assemble_page, decorate_votes
from forum_service.core.listing.params import ListingParams, Sort, TimeWindow
from forum_service.core.listing.ranking import DEFAULT_RANKING, IdentifierRanking, RankingStrategy
from forum_service.core.listing.spec import QuerySpec, SortOrder, build_spec, parse_limit
from forum_service.core.listing.store import SQLAlchemyListingStore
from forum_service.core.listing.viewer import ViewerState

__all__ = [
    "BANNED_USER",
    "BLOCKED_USER",
    "COMMENT",
    "COMMENT_CATEGORIES",
    "DEFAULT_RANKING",
    "MODERATOR",
    "NOT_DELETED",
    "POST",
    "POST_CATEGORIES",
    "THREAD_COMMENT",
    "AnchorFallback",
    "Condition",
    "CursorFilter",
    "EntityKind",
    "FallbackReason",
    "IdentifierRanking",
    "ItemCategory",
    "ListingFilter",
    "ListingParams",
    "ListingStore",
    "Page",
    "PageChild",
    "QuerySpec",
    "RankingStrategy",
    "SQLAlchemyListingStore",
    "Sort",
    "SortOrder",
    "TimeWindow",
    "ViewerState",
    "assemble_page",
    "build_spec",
    "decorate_votes",
    "parse_limit",
    "resolve_anchor",
    "run_listing",
]
