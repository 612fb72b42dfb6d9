"""Comment like domain service."""

from collections.abc import Sequence

import logfire
from sqlalchemy.exc import IntegrityError

from pastethread.domain.error import ContentDeletedError, NotFoundError
from pastethread.domain.model.comment_like import CommentLike
from pastethread.domain.repository import CommentLikeRepository
from pastethread.domain.value import CommentId, UserId

from .base import Service
from .comment_service import CommentService


class CommentLikeService(Service):
    """Domain service for liking comments."""

    def __init__(
        self,
        comment_like_repository: CommentLikeRepository,
        comment_service: CommentService,
    ) -> None:
        """Initialize comment like service.

        Args:
            comment_like_repository: Comment like repository
            comment_service: Comment domain service
        """
        self.comment_like_repository = comment_like_repository
        self.comment_service = comment_service

    async def toggle_like(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Like a comment, or remove the like if the user already liked it.

        The like relation and like_count change together; like_count is
        adjusted with atomic SQL updates.

        Args:
            comment_id: Comment ID
            user_id: User ID

        Returns:
            True if the comment is now liked by the user, False otherwise

        Raises:
            NotFoundError: If the comment does not exist
            ContentDeletedError: If the comment was deleted
            IntegrityError: If the like could not be stored and no like exists
        """
        with logfire.span(
            "comment_like_service.toggle_like",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            comment = await self.comment_service.get_comment_by_id(comment_id)
            if not comment:
                raise NotFoundError("Comment", str(comment_id))
            if comment.is_deleted:
                raise ContentDeletedError("Comment", str(comment_id))

            removed = await self.comment_like_repository.delete_by_user_and_comment(
                user_id=user_id, comment_id=comment_id
            )
            if removed:
                await self.comment_service.decrement_like_count(comment_id)
                logfire.info(
                    "Comment unliked", comment_id=str(comment_id), user_id=str(user_id)
                )
                return False

            like = CommentLike(comment_id=comment_id, user_id=user_id)
            try:
                await self.comment_like_repository.save(like)
            except IntegrityError as e:
                # Only a like stored by a concurrent request counts as liked
                existing = await self.comment_like_repository.find_by_user_and_comment(
                    user_id=user_id, comment_id=comment_id
                )
                if existing is None:
                    logfire.error(
                        "Like insert rejected",
                        comment_id=str(comment_id),
                        user_id=str(user_id),
                        error=str(e),
                    )
                    raise
                logfire.warn(
                    "Duplicate like attempt",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )
                return True

            await self.comment_service.increment_like_count(comment_id)
            logfire.info(
                "Comment liked", comment_id=str(comment_id), user_id=str(user_id)
            )
            return True

    async def get_liked_comment_ids(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> set[CommentId]:
        """Find which of the given comments a user has liked.

        Args:
            user_id: User ID
            comment_ids: Comment IDs to check

        Returns:
            Subset of comment_ids liked by the user
        """
        if not comment_ids:
            return set()

        # Batch query to fetch all likes at once (avoid N+1)
        likes = await self.comment_like_repository.find_by_user_and_comments(
            user_id=user_id, comment_ids=comment_ids
        )
        return {like.comment_id for like in likes}
