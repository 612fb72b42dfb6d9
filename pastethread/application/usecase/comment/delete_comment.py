"""Delete comment use case."""

import logfire
from pydantic import BaseModel

from pastethread.application.usecase.base import BaseUseCase
from pastethread.domain.error import ContentDeletedError, DomainError
from pastethread.domain.service import (
    CommentLikeService,
    CommentService,
    CommentTreeNode,
    UserService,
)
from pastethread.domain.value import CommentId, PasteId

from .common import require_id, require_viewer
from .result import CommentActionResult, CommentActionSuccess, CommentFailure, CommentItem
from .update_comment import load_owned_comment


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    paste_id: str  # For validation
    user_id: str | None = None  # Viewer, must be the author


class DeleteCommentUseCase(BaseUseCase):
    """Use case for soft deleting a comment.

    The comment becomes a tombstone: it stays in the thread so replies keep
    their place, and is rendered as "[deleted]".
    """

    def __init__(
        self,
        comment_service: CommentService,
        comment_like_service: CommentLikeService,
        user_service: UserService,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            comment_like_service: Like service for the viewer's like state
            user_service: User service for the author snapshot
        """
        self.comment_service = comment_service
        self.comment_like_service = comment_like_service
        self.user_service = user_service

    async def execute(self, request: DeleteCommentRequest) -> CommentActionResult:
        """Execute delete comment flow.

        Args:
            request: Delete comment request

        Returns:
            Envelope with the tombstoned comment
        """
        try:
            user_id = require_viewer(request.user_id, "delete comments")
            comment_id = CommentId(require_id(request.comment_id, "Comment ID"))
            paste_id = PasteId(require_id(request.paste_id, "Paste ID"))

            await load_owned_comment(
                self.comment_service, comment_id, paste_id, user_id
            )

            deleted = await self.comment_service.delete_comment(comment_id)
            if deleted is None:
                raise ContentDeletedError("Comment", str(comment_id))

            authors = await self.user_service.get_author_snapshots([deleted.author_id])
            liked = await self.comment_like_service.get_liked_comment_ids(
                user_id, [comment_id]
            )
        except DomainError as e:
            logfire.warn("Comment deletion failed", error=str(e), kind=e.kind.value)
            return CommentFailure.from_error(e)

        node = CommentTreeNode(
            comment=deleted,
            author=authors.get(user_id),
            is_liked_by_user=comment_id in liked,
        )
        return CommentActionSuccess(comment=CommentItem.from_domain(node))
