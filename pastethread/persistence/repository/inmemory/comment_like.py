"""In-memory comment like repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from pastethread.domain.model.comment_like import CommentLike
from pastethread.domain.repository.comment_like import CommentLikeRepository
from pastethread.domain.value import CommentId, UserId


class InMemoryCommentLikeRepository(CommentLikeRepository):
    """In-memory implementation of CommentLikeRepository for testing."""

    def __init__(self) -> None:
        self._likes: list[CommentLike] = []

    async def find_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[CommentLike]:
        """Find a like by user and comment."""
        for like in self._likes:
            if like.user_id == user_id and like.comment_id == comment_id:
                return like
        return None

    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> list[CommentLike]:
        """Find a user's likes on multiple comments (batch query)."""
        if not comment_ids:
            return []

        wanted = set(comment_ids)
        return [
            like
            for like in self._likes
            if like.user_id == user_id and like.comment_id in wanted
        ]

    async def save(self, like: CommentLike) -> CommentLike:
        """Save a like.

        Raises:
            IntegrityError: If like already exists (duplicate)
        """
        existing = await self.find_by_user_and_comment(like.user_id, like.comment_id)
        if existing:
            raise IntegrityError("Duplicate comment like", None, Exception())

        self._likes.append(like)
        return like

    async def delete_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> bool:
        """Delete a like by user and comment."""
        for i, like in enumerate(self._likes):
            if like.user_id == user_id and like.comment_id == comment_id:
                self._likes.pop(i)
                return True
        return False
