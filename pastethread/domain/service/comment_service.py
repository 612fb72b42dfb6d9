"""Comment domain service."""

from collections.abc import Collection, Mapping, Sequence
from datetime import datetime
from uuid import uuid4

import logfire

from pastethread.config import CommentSettings
from pastethread.domain.error import NotFoundError, ValidationError
from pastethread.domain.model.comment import Comment
from pastethread.domain.repository import CommentRepository
from pastethread.domain.value import (
    AuthorSnapshot,
    CommentId,
    OrphanPolicy,
    PasteId,
    SiblingOrder,
    UserId,
)

from .base import Service
from .comment_tree import CommentTreeNode, build_comment_tree, count_nodes


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self, comment_repository: CommentRepository, settings: CommentSettings
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            settings: Comment limits and thread policies
        """
        self.comment_repository = comment_repository
        self.settings = settings

    def validate_content(self, content: str) -> str:
        """Check comment content against the configured limits.

        Args:
            content: Raw content

        Returns:
            The content, unchanged

        Raises:
            ValidationError: If content is blank or too long
        """
        if len(content.strip()) < self.settings.min_length:
            raise ValidationError("Comment cannot be empty")
        if len(content) > self.settings.max_length:
            raise ValidationError(
                f"Comment too long (max {self.settings.max_length} characters)"
            )
        return content

    async def create_comment(
        self,
        paste_id: PasteId,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a paste or reply to another comment.

        Args:
            paste_id: Paste ID
            author_id: Author user ID
            content: Comment content
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If content or parent is invalid
            NotFoundError: If the parent comment does not exist
        """
        with logfire.span(
            "comment_service.create_comment",
            paste_id=str(paste_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            self.validate_content(content)

            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        paste_id=str(paste_id),
                    )
                    raise NotFoundError("Parent comment", str(parent_id))
                if parent.paste_id != paste_id:
                    logfire.error(
                        "Parent comment does not belong to paste",
                        parent_id=str(parent_id),
                        parent_paste_id=str(parent.paste_id),
                        target_paste_id=str(paste_id),
                    )
                    raise ValidationError("Parent comment does not belong to this paste")
                if parent.is_deleted:
                    raise ValidationError("Cannot reply to a deleted comment")

            now = datetime.now()
            comment = Comment(
                id=CommentId(str(uuid4())),
                paste_id=paste_id,
                author_id=author_id,
                content=content,
                parent_id=parent_id,
                like_count=0,
                is_deleted=False,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                paste_id=str(paste_id),
                is_reply=parent_id is not None,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def get_comments_for_paste(
        self, paste_id: PasteId, include_deleted: bool = True
    ) -> list[Comment]:
        """Get the flat comment snapshot of a paste.

        Args:
            paste_id: Paste ID
            include_deleted: Whether to include tombstones

        Returns:
            Comments ordered by creation time
        """
        with logfire.span(
            "comment_service.get_comments_for_paste",
            paste_id=str(paste_id),
            include_deleted=include_deleted,
        ):
            comments = await self.comment_repository.find_by_paste(
                paste_id=paste_id,
                include_deleted=include_deleted,
            )
            logfire.info(
                "Comments retrieved for paste",
                paste_id=str(paste_id),
                count=len(comments),
            )
            return comments

    def build_thread(
        self,
        comments: Sequence[Comment],
        authors: Mapping[UserId, AuthorSnapshot] | None = None,
        liked_ids: Collection[CommentId] | None = None,
    ) -> list[CommentTreeNode]:
        """Assemble a snapshot into a forest using the configured policies.

        Args:
            comments: Flat comment snapshot of one paste
            authors: Author snapshots keyed by user ID
            liked_ids: Comment IDs liked by the viewer, None if anonymous

        Returns:
            Root nodes with nested replies

        Raises:
            MalformedTreeError: If the snapshot cannot form a forest
        """
        with logfire.span(
            "comment_service.build_thread",
            count=len(comments),
            order=self.settings.sibling_order,
            orphan_policy=self.settings.orphan_policy,
        ):
            forest = build_comment_tree(
                comments,
                authors=authors,
                liked_ids=liked_ids,
                order=SiblingOrder(self.settings.sibling_order),
                orphans=OrphanPolicy(self.settings.orphan_policy),
            )
            logfire.info(
                "Built comment thread",
                root_count=len(forest),
                node_count=count_nodes(forest),
            )
            return forest

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Comment | None:
        """Update the content of a comment.

        Args:
            comment_id: Comment ID
            content: New content

        Returns:
            Updated comment, None if the comment doesn't exist or is deleted

        Raises:
            ValidationError: If content is blank or too long
        """
        with logfire.span(
            "comment_service.update_content",
            comment_id=str(comment_id),
            content_length=len(content),
        ):
            self.validate_content(content)
            updated = await self.comment_repository.update_content(comment_id, content)

            if updated:
                logfire.info(
                    "Comment content updated",
                    comment_id=str(comment_id),
                    paste_id=str(updated.paste_id),
                )
            else:
                logfire.warn(
                    "Comment not found or deleted for content update",
                    comment_id=str(comment_id),
                )

            return updated

    async def delete_comment(self, comment_id: CommentId) -> Comment | None:
        """Soft delete a comment.

        The record stays so that replies remain attached to the thread.

        Args:
            comment_id: Comment ID

        Returns:
            The tombstone, None if the comment doesn't exist or was already deleted
        """
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            deleted = await self.comment_repository.mark_deleted(comment_id)
            if deleted:
                logfire.info(
                    "Comment deleted",
                    comment_id=str(comment_id),
                    paste_id=str(deleted.paste_id),
                )
            else:
                logfire.warn(
                    "Comment not found or already deleted", comment_id=str(comment_id)
                )
            return deleted

    async def increment_like_count(self, comment_id: CommentId) -> None:
        """Atomically increment comment like count.

        Args:
            comment_id: Comment ID
        """
        with logfire.span(
            "comment_service.increment_like_count", comment_id=str(comment_id)
        ):
            await self.comment_repository.increment_like_count(comment_id)
            logfire.info("Comment like count incremented", comment_id=str(comment_id))

    async def decrement_like_count(self, comment_id: CommentId) -> None:
        """Atomically decrement comment like count (minimum 0).

        Args:
            comment_id: Comment ID
        """
        with logfire.span(
            "comment_service.decrement_like_count", comment_id=str(comment_id)
        ):
            await self.comment_repository.decrement_like_count(comment_id)
            logfire.info("Comment like count decremented", comment_id=str(comment_id))

    async def count_for_paste(self, paste_id: PasteId) -> int:
        """Count live comments on a paste.

        Args:
            paste_id: Paste ID

        Returns:
            Number of comments, tombstones excluded
        """
        with logfire.span("comment_service.count_for_paste", paste_id=str(paste_id)):
            count = await self.comment_repository.count_by_paste(paste_id)
            logfire.info("Comments counted", paste_id=str(paste_id), count=count)
            return count
