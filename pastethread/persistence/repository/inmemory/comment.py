"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional

from pastethread.domain.model.comment import Comment
from pastethread.domain.repository.comment import CommentRepository
from pastethread.domain.value import CommentId, PasteId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_paste(
        self,
        paste_id: PasteId,
        include_deleted: bool = True,
    ) -> list[Comment]:
        """Find all comments for a paste, oldest first."""
        comments = [c for c in self._comments.values() if c.paste_id == paste_id]

        if not include_deleted:
            comments = [c for c in comments if not c.is_deleted]

        # Stable sort keeps insertion order for equal timestamps
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Update the content of a live comment."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.is_deleted:
            return None
        updated = comment.model_copy(
            update={"content": content, "updated_at": datetime.now()}
        )
        self._comments[comment_id] = updated
        return updated

    async def mark_deleted(self, comment_id: CommentId) -> Optional[Comment]:
        """Turn a live comment into a tombstone."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.is_deleted:
            return None
        deleted = comment.model_copy(
            update={"is_deleted": True, "updated_at": datetime.now()}
        )
        self._comments[comment_id] = deleted
        return deleted

    async def increment_like_count(self, comment_id: CommentId) -> None:
        """Increment like count by 1."""
        comment = self._comments.get(comment_id)
        if comment:
            # Comments are immutable, store an updated copy
            self._comments[comment_id] = comment.model_copy(
                update={"like_count": comment.like_count + 1}
            )

    async def decrement_like_count(self, comment_id: CommentId) -> None:
        """Decrement like count by 1 (minimum 0)."""
        comment = self._comments.get(comment_id)
        if comment and comment.like_count > 0:
            self._comments[comment_id] = comment.model_copy(
                update={"like_count": comment.like_count - 1}
            )

    async def count_by_paste(self, paste_id: PasteId) -> int:
        """Count comments for a paste (excluding deleted)."""
        return sum(
            1
            for c in self._comments.values()
            if c.paste_id == paste_id and not c.is_deleted
        )
