"""Comments feature: subreddit comment listings and post threads."""

from forum_service.features.comments.models import Comment
from forum_service.features.comments.service import CommentService

__all__ = ["Comment", "CommentService"]
