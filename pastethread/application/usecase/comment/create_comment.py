"""Create comment use case."""

import logfire
from pydantic import BaseModel

from pastethread.application.usecase.base import BaseUseCase
from pastethread.domain.error import DomainError
from pastethread.domain.service import (
    CommentService,
    CommentTreeNode,
    PasteService,
    UserService,
)
from pastethread.domain.value import CommentId, PasteId

from .common import require_id, require_viewer
from .result import CommentActionResult, CommentActionSuccess, CommentFailure, CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    paste_id: str
    content: str
    user_id: str | None = None  # Viewer from the auth token, None if anonymous
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a paste or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        paste_service: PasteService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            paste_service: Paste domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.paste_service = paste_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CommentActionResult:
        """Execute create comment flow.

        Steps:
        1. Require an authenticated viewer
        2. Verify the paste exists and is live
        3. Resolve the author's account
        4. Create comment via comment service (validates content and parent)

        Args:
            request: Create comment request

        Returns:
            Envelope with the new comment (author attached, no replies)
        """
        try:
            user_id = require_viewer(request.user_id, "create comments")
            paste_id = PasteId(require_id(request.paste_id, "Paste ID"))
            parent_id = CommentId(request.parent_id) if request.parent_id else None

            await self.paste_service.get_live_paste(paste_id)
            author = await self.user_service.get_by_id(user_id)

            comment = await self.comment_service.create_comment(
                paste_id=paste_id,
                author_id=user_id,
                content=request.content,
                parent_id=parent_id,
            )
        except DomainError as e:
            logfire.warn("Comment creation failed", error=str(e), kind=e.kind.value)
            return CommentFailure.from_error(e)

        node = CommentTreeNode(
            comment=comment, author=author.to_author(), is_liked_by_user=False
        )
        return CommentActionSuccess(comment=CommentItem.from_domain(node))
