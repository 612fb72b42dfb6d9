"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from pastethread.domain.model.comment import Comment
from pastethread.domain.value import CommentId, PasteId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_paste(
        self,
        paste_id: PasteId,
        include_deleted: bool = True,
    ) -> List[Comment]:
        """Find all comments for a paste as a flat snapshot.

        Comments are returned oldest first. Tombstones are included by
        default so that their replies can still be attached.

        Args:
            paste_id: The paste ID
            include_deleted: Whether to include soft-deleted comments

        Returns:
            List of comments ordered by creation time
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Update the content of a live comment.

        Args:
            comment_id: The comment ID
            content: New content

        Returns:
            The updated comment, None if missing or deleted
        """
        pass

    @abstractmethod
    async def mark_deleted(self, comment_id: CommentId) -> Optional[Comment]:
        """Soft delete a comment, keeping the record in place.

        Args:
            comment_id: The comment ID

        Returns:
            The tombstoned comment, None if missing or already deleted
        """
        pass

    @abstractmethod
    async def increment_like_count(self, comment_id: CommentId) -> None:
        """Atomically increment like_count by 1.

        Args:
            comment_id: The comment ID
        """
        pass

    @abstractmethod
    async def decrement_like_count(self, comment_id: CommentId) -> None:
        """Atomically decrement like_count by 1, never below 0.

        Args:
            comment_id: The comment ID
        """
        pass

    @abstractmethod
    async def count_by_paste(self, paste_id: PasteId) -> int:
        """Count comments for a paste (excluding deleted).

        Args:
            paste_id: The paste ID

        Returns:
            Number of comments
        """
        pass
