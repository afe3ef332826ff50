"""Tests for viewer resolution in the users feature."""

from __future__ import annotations

import pytest

from forum_service.core.database import utcnow
from forum_service.core.exceptions import UnauthorizedException
from forum_service.core.listing import ListingParams
from forum_service.features.users.models import User
from forum_service.features.users.service import UserService, VoteTarget, viewer_state
from tests.conftest import make_id

POST_A, POST_B, POST_C = make_id(1), make_id(2), make_id(3)


def _user(**kwargs) -> User:
    return User(
        id=make_id(100),
        username="alice",
        upvoted_posts=kwargs.get("upvoted_posts", [POST_A]),
        downvoted_posts=kwargs.get("downvoted_posts", [POST_B]),
        saved_posts=kwargs.get("saved_posts", [POST_C]),
        upvoted_comments=kwargs.get("upvoted_comments", [POST_B]),
        downvoted_comments=[],
        saved_comments=[],
    )


class TestViewerState:
    def test_anonymous_without_user(self):
        assert viewer_state(None, VoteTarget.POSTS).is_anonymous

    def test_post_lists(self):
        state = viewer_state(_user(), VoteTarget.POSTS)

        assert state.user_id == make_id(100)
        assert state.vote_for(POST_A) == 1
        assert state.vote_for(POST_B) == -1
        assert state.vote_for(POST_C) == 0
        assert state.has_saved(POST_C)

    def test_comment_lists_are_separate(self):
        state = viewer_state(_user(), VoteTarget.COMMENTS)

        assert state.vote_for(POST_A) == 0
        assert state.vote_for(POST_B) == 1
        assert not state.has_saved(POST_C)


class TestUserService:
    async def test_unknown_viewer_is_anonymous(self, db_session):
        assert await UserService(db_session).get_viewer(make_id(999)) is None

    async def test_deleted_viewer_is_anonymous(self, db_session, make_user):
        user = await make_user("ghost", deleted_at=utcnow())

        assert await UserService(db_session).get_viewer(user.id) is None

    async def test_viewer_state_uses_stored_votes(self, db_session, make_user):
        user = await make_user("bob", upvoted_posts=[POST_A])

        state = await UserService(db_session).get_viewer_state(user.id, VoteTarget.POSTS)

        assert state.vote_for(POST_A) == 1

    async def test_blocked_users_require_a_viewer(self, db_session):
        with pytest.raises(UnauthorizedException):
            await UserService(db_session).list_blocked_users(None, ListingParams())
