"""Entity-kind descriptors.

The listing engine is generic; everything that differs between posts,
comments, moderators, banned users and blocked users lives in an
:class:`EntityKind`: which ``sort`` keys it offers, its default order, the
conditions every listing of that kind carries, how rows are shaped into
page children and whether viewer votes are layered on top.

Subreddit moderation categories (spam, unmoderated, edited) are variants of
the post and comment kinds with extra conditions and slightly different
field sets.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from enum import StrEnum
from types import MappingProxyType
from typing import Any

from forum_service.core.listing.filters import NOT_DELETED, Condition, ListingFilter, read_field
from forum_service.core.listing.page import Decorate, PageChild, decorate_votes
from forum_service.core.listing.params import Sort
from forum_service.core.listing.spec import SortOrder
from forum_service.core.listing.viewer import ViewerState

CREATED_DESC = SortOrder("created_at", "desc")
CREATED_ASC = SortOrder("created_at", "asc")
VOTES_DESC = SortOrder("number_of_votes", "desc")
SCORE_DESC = SortOrder("score", "desc")


class ItemCategory(StrEnum):
    """Moderation queues a subreddit exposes for posts and comments."""

    SPAM = "spam"
    UNMODERATED = "unmoderated"
    EDITED = "edited"


@dataclass(frozen=True, slots=True)
class EntityKind:
    """Everything the engine needs to know about one listable kind.

    Attributes:
        name: Identifier used in logs.
        shape: Row to :class:`PageChild`.
        sort_keys: ``sort`` value to order; ``top`` maps to None.
        default_sort: Order for absent or unrecognized ``sort`` values.
        conditions: Conditions every listing of this kind carries.
        decorate: Viewer decoration, None for kinds without votes.
        id_field: Field compared for id-ordered cursors.
    """

    name: str
    shape: Callable[[Any], PageChild]
    sort_keys: Mapping[str, SortOrder | None] = field(default_factory=lambda: MappingProxyType({}))
    default_sort: SortOrder | None = None
    conditions: tuple[Condition, ...] = ()
    decorate: Decorate | None = None
    id_field: str = "id"

    def base_filter(self, *extra: Condition) -> ListingFilter:
        """Soft-delete exclusion, the kind's conditions, then call-site conditions."""
        return ListingFilter.of(NOT_DELETED, *self.conditions, *extra)

    def variant(self, name: str, **changes: Any) -> EntityKind:
        return replace(self, name=name, **changes)


def _id(row: Any) -> str:
    return str(read_field(row, "id"))


# --------------------------------------------------------------------------- #
# Posts
# --------------------------------------------------------------------------- #


def _post_data(row: Any) -> dict[str, Any]:
    return {
        "id": _id(row),
        "subreddit": read_field(row, "subreddit_name"),
        "postedBy": read_field(row, "owner_username"),
        "title": read_field(row, "title"),
        "link": read_field(row, "link"),
        "nsfw": read_field(row, "nsfw"),
        "spoiler": read_field(row, "spoiler"),
        "votes": read_field(row, "number_of_votes"),
        "numberOfComments": read_field(row, "number_of_comments"),
        "flair": read_field(row, "flair"),
        "postedAt": read_field(row, "created_at"),
        "editedAt": read_field(row, "edited_at"),
    }


def shape_post(row: Any) -> PageChild:
    return PageChild(_id(row), _post_data(row))


def shape_unmoderated_post(row: Any) -> PageChild:
    data = _post_data(row)
    data["content"] = read_field(row, "content")
    data["images"] = read_field(row, "images") or []
    data["video"] = read_field(row, "video")
    return PageChild(_id(row), data)


def shape_spam_post(row: Any) -> PageChild:
    data = _post_data(row)
    data["spammedAt"] = read_field(row, "spammed_at")
    return PageChild(_id(row), data)


POST = EntityKind(
    name="post",
    shape=shape_post,
    sort_keys=MappingProxyType(
        {
            Sort.BEST: CREATED_DESC,
            Sort.NEW: CREATED_DESC,
            Sort.OLD: CREATED_ASC,
            Sort.HOT: SCORE_DESC,
            Sort.TOP: None,
        }
    ),
    default_sort=CREATED_DESC,
    decorate=decorate_votes,
)


# --------------------------------------------------------------------------- #
# Comments
# --------------------------------------------------------------------------- #


def _comment_data(row: Any) -> dict[str, Any]:
    return {
        "id": _id(row),
        "subreddit": read_field(row, "subreddit_name"),
        "commentedBy": read_field(row, "owner_username"),
        "commentedAt": read_field(row, "created_at"),
        "editedAt": read_field(row, "edited_at"),
        "votes": read_field(row, "number_of_votes"),
    }


def _with_post(row: Any, comment: dict[str, Any]) -> PageChild:
    post = read_field(row, "post")
    return PageChild(
        _id(row),
        {
            "postId": str(read_field(row, "post_id")),
            "postTitle": read_field(post, "title") if post is not None else None,
            "comment": comment,
        },
    )


def shape_comment(row: Any) -> PageChild:
    return _with_post(row, _comment_data(row))


def shape_spam_comment(row: Any) -> PageChild:
    comment = _comment_data(row)
    comment["spammedAt"] = read_field(row, "spammed_at")
    return _with_post(row, comment)


def decorate_comment_votes(child: PageChild, viewer: ViewerState | None) -> PageChild:
    """Vote state for subreddit comment listings, placed inside ``comment``."""
    inner = decorate_votes(PageChild(child.id, child.data["comment"]), viewer)
    return PageChild(child.id, {**child.data, "comment": inner.data})


def shape_thread_comment(row: Any) -> PageChild:
    data = _comment_data(row)
    data["postId"] = str(read_field(row, "post_id"))
    data["content"] = read_field(row, "content")
    return PageChild(_id(row), data)


_COMMENT_SORT_KEYS = MappingProxyType(
    {
        Sort.BEST: VOTES_DESC,
        Sort.NEW: CREATED_DESC,
        Sort.OLD: CREATED_ASC,
        Sort.TOP: None,
    }
)

COMMENT = EntityKind(
    name="comment",
    shape=shape_comment,
    sort_keys=_COMMENT_SORT_KEYS,
    default_sort=VOTES_DESC,
    decorate=decorate_comment_votes,
)

THREAD_COMMENT = COMMENT.variant(
    "thread-comment",
    shape=shape_thread_comment,
    decorate=decorate_votes,
)


# --------------------------------------------------------------------------- #
# Moderation categories
# --------------------------------------------------------------------------- #

_CATEGORY_CONDITIONS: dict[ItemCategory, tuple[Condition, ...]] = {
    ItemCategory.SPAM: (
        Condition.not_null("spammed_at"),
        Condition.is_null("removed_at"),
    ),
    ItemCategory.UNMODERATED: (
        Condition.is_null("approved_at"),
        Condition.is_null("spammed_at"),
        Condition.is_null("removed_at"),
    ),
    ItemCategory.EDITED: (
        Condition.not_null("edited_at"),
        Condition.is_null("removed_at"),
    ),
}

POST_CATEGORIES: dict[ItemCategory, EntityKind] = {
    ItemCategory.SPAM: POST.variant(
        "post:spam",
        shape=shape_spam_post,
        conditions=_CATEGORY_CONDITIONS[ItemCategory.SPAM],
    ),
    ItemCategory.UNMODERATED: POST.variant(
        "post:unmoderated",
        shape=shape_unmoderated_post,
        conditions=_CATEGORY_CONDITIONS[ItemCategory.UNMODERATED],
    ),
    ItemCategory.EDITED: POST.variant(
        "post:edited",
        conditions=_CATEGORY_CONDITIONS[ItemCategory.EDITED],
    ),
}

COMMENT_CATEGORIES: dict[ItemCategory, EntityKind] = {
    ItemCategory.SPAM: COMMENT.variant(
        "comment:spam",
        shape=shape_spam_comment,
        conditions=_CATEGORY_CONDITIONS[ItemCategory.SPAM],
    ),
    ItemCategory.UNMODERATED: COMMENT.variant(
        "comment:unmoderated",
        conditions=_CATEGORY_CONDITIONS[ItemCategory.UNMODERATED],
    ),
    ItemCategory.EDITED: COMMENT.variant(
        "comment:edited",
        conditions=_CATEGORY_CONDITIONS[ItemCategory.EDITED],
    ),
}


# --------------------------------------------------------------------------- #
# Users
# --------------------------------------------------------------------------- #


def shape_moderator(row: Any) -> PageChild:
    return PageChild(
        _id(row),
        {
            "username": read_field(row, "username"),
            "dateOfModeration": read_field(row, "date_of_moderation"),
            "permissions": list(read_field(row, "permissions") or []),
        },
    )


def shape_banned_user(row: Any) -> PageChild:
    user = read_field(row, "user")
    return PageChild(
        _id(row),
        {
            "username": read_field(user, "username"),
            "userPhoto": read_field(user, "user_photo"),
            "bannedAt": read_field(row, "banned_at"),
            "banPeriod": read_field(row, "ban_period"),
            "modNote": read_field(row, "mod_note"),
            "noteInclude": read_field(row, "note_include"),
            "reasonForBan": read_field(row, "reason_for_ban"),
        },
    )


def shape_blocked_user(row: Any) -> PageChild:
    user = read_field(row, "blocked")
    return PageChild(
        _id(row),
        {
            "username": read_field(user, "username"),
            "avatar": read_field(user, "avatar"),
            "blockDate": read_field(row, "block_date"),
        },
    )


MODERATOR = EntityKind(name="moderator", shape=shape_moderator)
BANNED_USER = EntityKind(name="banned-user", shape=shape_banned_user)
BLOCKED_USER = EntityKind(name="blocked-user", shape=shape_blocked_user)


__all__ = [
    "BANNED_USER",
    "BLOCKED_USER",
    "COMMENT",
    "COMMENT_CATEGORIES",
    "CREATED_ASC",
    "CREATED_DESC",
    "MODERATOR",
    "POST",
    "POST_CATEGORIES",
    "SCORE_DESC",
    "THREAD_COMMENT",
    "VOTES_DESC",
    "EntityKind",
    "ItemCategory",
    "decorate_comment_votes",
    "shape_banned_user",
    "shape_blocked_user",
    "shape_comment",
    "shape_moderator",
    "shape_post",
    "shape_spam_comment",
    "shape_spam_post",
    "shape_thread_comment",
    "shape_unmoderated_post",
]
