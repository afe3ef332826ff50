"""Import every feature model so the tables register on ``Base.metadata``."""

from forum_service.features.comments.models import Comment
from forum_service.features.posts.models import Post
from forum_service.features.subreddits.models import Ban, Moderator, Subreddit
from forum_service.features.users.models import Block, User

__all__ = ["Ban", "Block", "Comment", "Moderator", "Post", "Subreddit", "User"]
