"""Unit tests for the listing spec builder."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from forum_service.core.listing import (
    BLOCKED_USER,
    COMMENT,
    MODERATOR,
    POST,
    ListingParams,
    QuerySpec,
    SortOrder,
    build_spec,
    parse_limit,
)
from forum_service.core.listing.spec import resolve_time_filter
from forum_service.core.settings.listing import ListingSettings

NOW = datetime(2024, 3, 31, 12, 0, tzinfo=UTC)


@pytest.fixture
def settings() -> ListingSettings:
    return ListingSettings()


# ──────────────────────────────────────────────────────────────
# Limit
# ──────────────────────────────────────────────────────────────


class TestParseLimit:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (None, 25),
            ("", 25),
            ("abc", 25),
            (float("nan"), 25),
            ("10", 10),
            (" 42 ", 42),
            ("30abc", 30),
            (7.9, 7),
            ("100", 100),
            ("101", 100),
            (5000, 100),
            ("0", 1),
            ("-3", 1),
            (-50, 1),
            (1, 1),
        ],
    )
    def test_limit_is_parsed_and_clamped(self, raw, expected, settings):
        assert parse_limit(raw, settings) == expected

    def test_bounds_come_from_settings(self):
        custom = ListingSettings(default_limit=10, max_limit=50, min_limit=2)

        assert parse_limit(None, custom) == 10
        assert parse_limit("75", custom) == 50
        assert parse_limit("0", custom) == 2

    def test_default_settings_are_loaded_when_not_given(self):
        assert parse_limit(None) == 25


# ──────────────────────────────────────────────────────────────
# Sort
# ──────────────────────────────────────────────────────────────


class TestPostSort:
    @pytest.mark.parametrize(
        ("sort", "expected"),
        [
            (None, SortOrder("created_at", "desc")),
            ("best", SortOrder("created_at", "desc")),
            ("new", SortOrder("created_at", "desc")),
            ("old", SortOrder("created_at", "asc")),
            ("hot", SortOrder("score", "desc")),
            ("bogus", SortOrder("created_at", "desc")),
        ],
    )
    def test_sort_table(self, sort, expected, settings):
        spec = build_spec(ListingParams(sort=sort), POST, now=NOW, settings=settings)

        assert spec.sort_order == expected
        assert spec.sort_field == expected.field
        assert spec.time_filter is None

    def test_top_has_no_sort_order(self, settings):
        spec = build_spec(ListingParams(sort="top"), POST, now=NOW, settings=settings)

        assert spec.sort_order is None
        assert spec.sort_field is None
        assert spec.time_filter is None


class TestCommentSort:
    @pytest.mark.parametrize(
        ("sort", "expected"),
        [
            (None, SortOrder("number_of_votes", "desc")),
            ("best", SortOrder("number_of_votes", "desc")),
            ("new", SortOrder("created_at", "desc")),
            ("old", SortOrder("created_at", "asc")),
            ("hot", SortOrder("number_of_votes", "desc")),
            ("???", SortOrder("number_of_votes", "desc")),
        ],
    )
    def test_sort_table(self, sort, expected, settings):
        spec = build_spec(ListingParams(sort=sort), COMMENT, settings=settings)

        assert spec.sort_order == expected

    def test_top(self, settings):
        spec = build_spec(ListingParams(sort="top", time="week"), COMMENT, now=NOW, settings=settings)

        assert spec.sort_order is None
        assert spec.time_filter == NOW - timedelta(days=7)


@pytest.mark.parametrize("kind", [MODERATOR, BLOCKED_USER])
@pytest.mark.parametrize("sort", [None, "new", "old", "top", "hot"])
def test_user_kinds_are_always_id_ordered(kind, sort, settings):
    spec = build_spec(ListingParams(sort=sort, time="day"), kind, now=NOW, settings=settings)

    assert spec == QuerySpec(sort_order=None, time_filter=None, limit=25)


# ──────────────────────────────────────────────────────────────
# Time window
# ──────────────────────────────────────────────────────────────


class TestTimeFilter:
    @pytest.mark.parametrize(
        ("time", "expected"),
        [
            ("hour", datetime(2024, 3, 31, 11, 0, tzinfo=UTC)),
            ("day", datetime(2024, 3, 30, 12, 0, tzinfo=UTC)),
            ("week", datetime(2024, 3, 24, 12, 0, tzinfo=UTC)),
            # calendar month: March 31st minus one month clamps to February 29th
            ("month", datetime(2024, 2, 29, 12, 0, tzinfo=UTC)),
            ("year", datetime(2023, 3, 31, 12, 0, tzinfo=UTC)),
        ],
    )
    def test_windows(self, time, expected):
        assert resolve_time_filter(time, NOW) == expected

    @pytest.mark.parametrize("time", [None, "", "decade", "all"])
    def test_unknown_window_has_no_bound(self, time):
        assert resolve_time_filter(time, NOW) is None

    def test_time_ignored_without_top(self, settings):
        spec = build_spec(ListingParams(sort="new", time="hour"), POST, now=NOW, settings=settings)

        assert spec.time_filter is None

    def test_top_with_time(self, settings):
        spec = build_spec(ListingParams(sort="top", time="day"), POST, now=NOW, settings=settings)

        assert spec.time_filter == NOW - timedelta(days=1)

    def test_top_uses_current_time_by_default(self, settings):
        before = datetime.now(UTC)
        spec = build_spec(ListingParams(sort="top", time="hour"), POST, settings=settings)
        after = datetime.now(UTC)

        assert before - timedelta(hours=1) <= spec.time_filter <= after - timedelta(hours=1)


def test_build_spec_combines_everything(settings):
    params = ListingParams(sort="old", limit="250", before="x" * 24)

    spec = build_spec(params, POST, now=NOW, settings=settings)

    assert spec == QuerySpec(
        sort_order=SortOrder("created_at", "asc"),
        time_filter=None,
        limit=100,
    )
