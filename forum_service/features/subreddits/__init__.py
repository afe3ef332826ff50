"""Subreddits feature: lookups, moderators and banned users."""

from forum_service.features.subreddits.models import Ban, Moderator, Subreddit
from forum_service.features.subreddits.service import SubredditService

__all__ = ["Ban", "Moderator", "Subreddit", "SubredditService"]
