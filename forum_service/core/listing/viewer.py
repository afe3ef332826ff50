"""Viewer state used to decorate post and comment listings."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class ViewerState:
    """Immutable snapshot of the requesting user's votes and saved items.

    The sets hold ids of a single item type; the caller picks post or comment
    lists depending on what is being listed.
    """

    user_id: str | None = None
    upvoted: frozenset[str] = field(default_factory=frozenset)
    downvoted: frozenset[str] = field(default_factory=frozenset)
    saved: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def anonymous(cls) -> ViewerState:
        return cls()

    @classmethod
    def of(
        cls,
        user_id: str | None,
        *,
        upvoted: Iterable[str] = (),
        downvoted: Iterable[str] = (),
        saved: Iterable[str] = (),
    ) -> ViewerState:
        return cls(
            user_id=user_id,
            upvoted=frozenset(str(i) for i in upvoted),
            downvoted=frozenset(str(i) for i in downvoted),
            saved=frozenset(str(i) for i in saved),
        )

    @property
    def is_anonymous(self) -> bool:
        return self.user_id is None

    def vote_for(self, item_id: str) -> int:
        """1 for an upvote, -1 for a downvote, 0 otherwise."""
        if item_id in self.upvoted:
            return 1
        if item_id in self.downvoted:
            return -1
        return 0

    def has_saved(self, item_id: str) -> bool:
        return item_id in self.saved


__all__ = ["ViewerState"]
