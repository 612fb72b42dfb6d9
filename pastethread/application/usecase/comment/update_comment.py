"""Update comment use case."""

import logfire
from pydantic import BaseModel

from pastethread.application.usecase.base import BaseUseCase
from pastethread.domain.error import (
    ContentDeletedError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from pastethread.domain.model import Comment
from pastethread.domain.service import (
    CommentLikeService,
    CommentService,
    CommentTreeNode,
    UserService,
)
from pastethread.domain.value import CommentId, PasteId, UserId

from .common import require_id, require_viewer
from .result import CommentActionResult, CommentActionSuccess, CommentFailure, CommentItem


async def load_owned_comment(
    comment_service: CommentService,
    comment_id: CommentId,
    paste_id: PasteId,
    user_id: UserId,
) -> Comment:
    """Load a live comment of a paste and check the viewer wrote it.

    Raises:
        NotFoundError: If the comment doesn't exist
        ValidationError: If the comment belongs to another paste
        NotAuthorizedError: If the viewer is not the author
        ContentDeletedError: If the comment was deleted
    """
    comment = await comment_service.get_comment_by_id(comment_id)
    if comment is None:
        raise NotFoundError("Comment", str(comment_id))
    if comment.paste_id != paste_id:
        raise ValidationError(
            f"Comment {comment_id} does not belong to paste {paste_id}"
        )
    if comment.author_id != user_id:
        raise NotAuthorizedError("comment", str(comment_id), str(user_id))
    if comment.is_deleted:
        raise ContentDeletedError("Comment", str(comment_id))
    return comment


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str
    paste_id: str  # For validation
    content: str
    user_id: str | None = None  # Viewer, must be the author


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment's content."""

    def __init__(
        self,
        comment_service: CommentService,
        comment_like_service: CommentLikeService,
        user_service: UserService,
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            comment_like_service: Like service for the viewer's like state
            user_service: User service for the author snapshot
        """
        self.comment_service = comment_service
        self.comment_like_service = comment_like_service
        self.user_service = user_service

    async def execute(self, request: UpdateCommentRequest) -> CommentActionResult:
        """Execute update comment flow.

        Args:
            request: Update comment request

        Returns:
            Envelope with the updated comment
        """
        try:
            user_id = require_viewer(request.user_id, "edit comments")
            comment_id = CommentId(require_id(request.comment_id, "Comment ID"))
            paste_id = PasteId(require_id(request.paste_id, "Paste ID"))

            await load_owned_comment(
                self.comment_service, comment_id, paste_id, user_id
            )

            updated = await self.comment_service.update_content(
                comment_id, request.content
            )
            # Deleted between the check and the update
            if updated is None:
                raise ContentDeletedError("Comment", str(comment_id))

            authors = await self.user_service.get_author_snapshots([updated.author_id])
            liked = await self.comment_like_service.get_liked_comment_ids(
                user_id, [comment_id]
            )
        except DomainError as e:
            logfire.warn("Comment update failed", error=str(e), kind=e.kind.value)
            return CommentFailure.from_error(e)

        node = CommentTreeNode(
            comment=updated,
            author=authors.get(user_id),
            is_liked_by_user=comment_id in liked,
        )
        return CommentActionSuccess(comment=CommentItem.from_domain(node))
