"""Posts feature: subreddit post listings."""

from forum_service.features.posts.models import Post
from forum_service.features.posts.service import PostService

__all__ = ["Post", "PostService"]
