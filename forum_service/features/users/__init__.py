"""Users feature: viewer resolution and blocked-user listing."""

from forum_service.features.users.models import Block, User
from forum_service.features.users.service import UserService, VoteTarget, viewer_state

__all__ = ["Block", "User", "UserService", "VoteTarget", "viewer_state"]
