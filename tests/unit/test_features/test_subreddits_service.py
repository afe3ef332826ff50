"""Tests for subreddit lookups."""

from __future__ import annotations

import pytest

from forum_service.core.database import utcnow
from forum_service.core.exceptions import BadRequestException, NotFoundException
from forum_service.features.subreddits.service import SubredditService
from tests.conftest import make_id


async def test_search_by_title(db_session, make_subreddit):
    subreddit = await make_subreddit("python")

    assert (await SubredditService(db_session).search_subreddit("python")).id == subreddit.id


async def test_search_by_id_accepts_uppercase(db_session, make_subreddit):
    subreddit = await make_subreddit("python")

    found = await SubredditService(db_session).search_subreddit_by_id(subreddit.id.upper())

    assert found.id == subreddit.id


@pytest.mark.parametrize(
    ("lookup", "message"),
    [
        ("search_subreddit", "This subreddit isn't found"),
        ("search_subreddit_by_id", "This subreddit isn't found"),
    ],
)
async def test_unknown_subreddit(db_session, lookup, message):
    key = "nope" if lookup == "search_subreddit" else make_id(31337)

    with pytest.raises(BadRequestException) as exc_info:
        await getattr(SubredditService(db_session), lookup)(key)

    assert exc_info.value.detail == message


async def test_deleted_subreddit(db_session, make_subreddit):
    await make_subreddit("gone", deleted_at=utcnow())

    with pytest.raises(BadRequestException, match="This subreddit is deleted"):
        await SubredditService(db_session).search_subreddit("gone")


async def test_malformed_id(db_session):
    with pytest.raises(BadRequestException, match="This is not a valid subreddit id"):
        await SubredditService(db_session).search_subreddit_by_id("r/python")


async def test_listing_lookup_turns_absence_into_404(db_session):
    with pytest.raises(NotFoundException) as exc_info:
        await SubredditService(db_session).get_listing_subreddit("nope")

    assert exc_info.value.detail == "Subreddit not found"
