"""Listing engine tests against a real (in-memory SQLite) store."""

from __future__ import annotations

from datetime import timedelta

import pytest

from forum_service.core.database import ComparisonFilter, InvalidFilterError, utcnow
from forum_service.core.exceptions import BadRequestException
from forum_service.core.listing import (
    COMMENT,
    MODERATOR,
    POST,
    Condition,
    ListingFilter,
    ListingParams,
    SortOrder,
    SQLAlchemyListingStore,
    run_listing,
)
from forum_service.features.comments.models import Comment
from forum_service.features.posts.models import Post
from forum_service.features.subreddits.models import Moderator
from tests.conftest import NOW, make_id

MISSING_ID = "0123456789abcdef01234567"


@pytest.fixture
async def subreddit(make_subreddit):
    return await make_subreddit("python")


@pytest.fixture
async def posts(subreddit, make_post):
    """40 posts, ``posts[0]`` is the most recent (1 minute ago)."""
    return [
        await make_post(subreddit, minutes_ago=i, score=float(i % 7), number_of_votes=i)
        for i in range(1, 41)
    ]


@pytest.fixture
def post_store(db_session, subreddit):
    return SQLAlchemyListingStore(
        db_session,
        Post,
        scope=[ComparisonFilter(Post.subreddit_id, "eq", subreddit.id)],
    )


def ids(page):
    return [child.id for child in page.children]


class TestFirstPage:
    async def test_thirty_comments_default_listing(self, db_session, subreddit, make_post, make_comment):
        post = await make_post(subreddit, minutes_ago=500)
        comments = [
            await make_comment(post, minutes_ago=i, number_of_votes=i * 3)
            for i in range(1, 31)
        ]
        store = SQLAlchemyListingStore(
            db_session,
            Comment,
            scope=[ComparisonFilter(Comment.post_id, "eq", post.id)],
        )

        page = await run_listing(COMMENT, ListingParams(), store)

        by_votes = sorted(comments, key=lambda c: c.number_of_votes, reverse=True)
        assert ids(page) == [c.id for c in by_votes[:25]]
        assert page.before == by_votes[0].id
        assert page.after == by_votes[24].id

    async def test_soft_deleted_rows_are_never_listed(self, db_session, posts, post_store):
        posts[0].deleted_at = utcnow()
        await db_session.commit()

        page = await run_listing(POST, ListingParams(sort="new", limit="100"), post_store)

        assert posts[0].id not in ids(page)
        assert len(page.children) == 39

    async def test_scope_limits_rows_to_subreddit(self, posts, post_store, make_subreddit, make_post):
        other = await make_subreddit("rust")
        foreign = await make_post(other, minutes_ago=0)

        page = await run_listing(POST, ListingParams(limit=100), post_store)

        assert foreign.id not in ids(page)

    @pytest.mark.parametrize(("limit", "expected"), [(None, 25), ("abc", 25), ("0", 1), ("7", 7), ("500", 40)])
    async def test_page_size(self, posts, post_store, limit, expected):
        page = await run_listing(POST, ListingParams(limit=limit), post_store)

        assert len(page.children) == expected

    async def test_hot_orders_by_score(self, posts, post_store):
        page = await run_listing(POST, ListingParams(sort="hot", limit=100), post_store)

        scores = [child.data["votes"] % 7 for child in page.children]
        assert scores == sorted(scores, reverse=True)


class TestCursorPagination:
    async def test_new_after_tenth_returns_ranks_eleven_to_thirty_five(self, posts, post_store):
        page = await run_listing(POST, ListingParams(sort="new", after=posts[9].id), post_store)

        assert ids(page) == [p.id for p in posts[10:35]]
        assert page.before == posts[10].id
        assert page.after == posts[34].id

    async def test_new_before_anchor_only_returns_newer_items(self, posts, post_store):
        anchor = posts[29]

        page = await run_listing(POST, ListingParams(sort="new", before=anchor.id), post_store)

        assert ids(page) == [p.id for p in posts[:25]]
        assert all(p.created_at > anchor.created_at for p in posts[:25])

    async def test_old_after_anchor_moves_forward_in_time(self, posts, post_store):
        oldest_first = list(reversed(posts))
        anchor = oldest_first[4]

        page = await run_listing(POST, ListingParams(sort="old", after=anchor.id, limit=10), post_store)

        assert ids(page) == [p.id for p in oldest_first[5:15]]

    async def test_old_before_anchor_only_returns_older_items(self, posts, post_store):
        oldest_first = list(reversed(posts))
        anchor = oldest_first[3]

        page = await run_listing(POST, ListingParams(sort="old", before=anchor.id), post_store)

        assert ids(page) == [p.id for p in oldest_first[:3]]

    async def test_walking_forward_visits_every_item_once(self, posts, post_store):
        seen: list[str] = []
        after = None
        while True:
            page = await run_listing(POST, ListingParams(sort="new", after=after, limit=15), post_store)
            if page.is_empty:
                break
            seen.extend(ids(page))
            after = page.after

        assert seen == [p.id for p in posts]

    async def test_walking_tied_votes_visits_every_comment_once(
        self, db_session, subreddit, make_post, make_comment
    ):
        post = await make_post(subreddit, minutes_ago=500)
        comments = [await make_comment(post, minutes_ago=i, number_of_votes=1) for i in range(1, 31)]
        store = SQLAlchemyListingStore(
            db_session,
            Comment,
            scope=[ComparisonFilter(Comment.post_id, "eq", post.id)],
        )

        seen: list[str] = []
        after = None
        while True:
            page = await run_listing(COMMENT, ListingParams(after=after), store)
            if page.is_empty:
                break
            seen.extend(ids(page))
            after = page.after

        assert seen == [c.id for c in comments]

    async def test_before_anchor_with_tied_scores(self, subreddit, make_post, post_store):
        tied = [await make_post(subreddit, minutes_ago=m, score=3.0) for m in range(1, 11)]

        page = await run_listing(POST, ListingParams(sort="hot", before=tied[6].id), post_store)

        assert ids(page) == [p.id for p in tied[:6]]

    async def test_conflicting_cursors(self, posts, post_store):
        with pytest.raises(BadRequestException):
            await run_listing(
                POST,
                ListingParams(before=posts[0].id, after=posts[1].id),
                post_store,
            )

    @pytest.mark.parametrize("side", ["before", "after"])
    async def test_unknown_anchor_degrades_to_first_page(self, posts, post_store, side):
        first = await run_listing(POST, ListingParams(sort="new"), post_store)

        page = await run_listing(POST, ListingParams(sort="new", **{side: MISSING_ID}), post_store)

        assert page == first

    async def test_deleted_anchor_degrades_to_first_page(self, db_session, posts, post_store):
        posts[5].deleted_at = utcnow()
        await db_session.commit()
        first = await run_listing(POST, ListingParams(sort="new"), post_store)

        page = await run_listing(POST, ListingParams(sort="new", after=posts[5].id), post_store)

        assert page == first

    async def test_malformed_anchor_degrades_to_first_page(self, posts, post_store):
        first = await run_listing(POST, ListingParams(), post_store)

        assert await run_listing(POST, ListingParams(after="garbage"), post_store) == first

    async def test_listing_is_idempotent(self, posts, post_store):
        params = ListingParams(sort="old", after=posts[20].id, limit="12")

        assert await run_listing(POST, params, post_store) == await run_listing(POST, params, post_store)


class TestTopListing:
    async def test_top_without_time_returns_everything_in_id_order(self, posts, post_store):
        page = await run_listing(POST, ListingParams(sort="top", limit=100), post_store, now=NOW)

        assert ids(page) == sorted(p.id for p in posts)

    async def test_top_day_only_returns_last_twenty_four_hours(self, subreddit, make_post, post_store):
        recent = [await make_post(subreddit, minutes_ago=m) for m in (5, 600, 1439, 1440)]
        old = [await make_post(subreddit, minutes_ago=m) for m in (1441, 3000, 20000)]

        page = await run_listing(POST, ListingParams(sort="top", time="day"), post_store, now=NOW)

        assert set(ids(page)) == {p.id for p in recent}
        assert not set(ids(page)) & {p.id for p in old}

    async def test_top_after_anchor_uses_identifier(self, posts, post_store):
        ordered = sorted(posts, key=lambda p: p.id)

        page = await run_listing(
            POST, ListingParams(sort="top", after=ordered[4].id, limit=3), post_store, now=NOW
        )

        assert ids(page) == [p.id for p in ordered[5:8]]


class TestModeratorListing:
    async def test_moderators_are_listed_in_id_order(self, db_session, subreddit, add):
        mods = [
            await add(
                Moderator(
                    id=make_id(1000 + i),
                    subreddit_id=subreddit.id,
                    user_id=make_id(i),
                    username=f"mod{i}",
                    permissions=["everything"],
                    date_of_moderation=NOW - timedelta(days=i),
                )
            )
            for i in range(5)
        ]
        store = SQLAlchemyListingStore(
            db_session,
            Moderator,
            scope=[ComparisonFilter(Moderator.subreddit_id, "eq", subreddit.id)],
        )

        page = await run_listing(MODERATOR, ListingParams(after=mods[1].id, sort="new"), store)

        assert [c.data["username"] for c in page.children] == ["mod2", "mod3", "mod4"]
        assert page.children[0].data["permissions"] == ["everything"]
        assert "vote" not in page.children[0].data


class TestStore:
    async def test_get_by_id_returns_soft_deleted_rows(self, db_session, posts, post_store):
        posts[0].deleted_at = utcnow()
        await db_session.commit()

        found = await post_store.get_by_id(posts[0].id)

        assert found is not None
        assert found.deleted_at is not None

    def test_cursor_bound_splits_ties_by_id(self, post_store):
        stmt = post_store.build_statement(
            ListingFilter.of(Condition("number_of_votes", "lt", 4, Condition("id", "lt", MISSING_ID))),
            SortOrder("number_of_votes", "desc"),
            5,
        )

        sql = str(stmt.compile(compile_kwargs={"literal_binds": True}))
        assert "posts.number_of_votes < 4 OR" in sql
        assert f"posts.number_of_votes = 4 AND posts.id < '{MISSING_ID}'" in sql

    async def test_get_by_id_missing(self, posts, post_store):
        assert await post_store.get_by_id(MISSING_ID) is None

    async def test_unknown_field_is_rejected(self, post_store):
        with pytest.raises(InvalidFilterError):
            await post_store.fetch(ListingFilter.of(Condition.eq("nope", 1)), None, 10)

    async def test_ties_are_broken_by_id_in_sort_direction(self, db_session, subreddit, make_post, post_store):
        same = [await make_post(subreddit, minutes_ago=10, id=make_id(10_000 + i)) for i in range(3)]

        rows = await post_store.fetch(ListingFilter(), SortOrder("created_at", "desc"), 10)

        assert [r.id for r in rows] == [p.id for p in reversed(same)]

    def test_statement_applies_filters(self, post_store):
        stmt = post_store.build_statement(
            ListingFilter.of(Condition.is_null("deleted_at"), Condition("number_of_votes", "gte", 2)),
            SortOrder("score", "desc"),
            5,
        )

        sql = str(stmt.compile(compile_kwargs={"literal_binds": True}))
        assert "posts.deleted_at IS NULL" in sql
        assert "posts.number_of_votes >= 2" in sql
        assert "ORDER BY posts.score DESC, posts.id DESC" in sql
        assert "LIMIT 5" in sql

