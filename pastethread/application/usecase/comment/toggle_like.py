"""Toggle comment like use case."""

import logfire
from pydantic import BaseModel

from pastethread.application.usecase.base import BaseUseCase
from pastethread.domain.error import DomainError
from pastethread.domain.service import CommentLikeService, UserService
from pastethread.domain.value import CommentId

from .common import require_id, require_viewer
from .result import CommentFailure, CommentLikeResult, CommentLikeSuccess


class ToggleCommentLikeRequest(BaseModel):
    """Toggle like request."""

    comment_id: str
    user_id: str | None = None  # Viewer from the auth token


class ToggleCommentLikeUseCase(BaseUseCase):
    """Use case for liking or unliking a comment."""

    def __init__(
        self,
        comment_like_service: CommentLikeService,
        user_service: UserService,
    ) -> None:
        """Initialize toggle like use case.

        Args:
            comment_like_service: Comment like domain service
            user_service: User domain service
        """
        self.comment_like_service = comment_like_service
        self.user_service = user_service

    async def execute(self, request: ToggleCommentLikeRequest) -> CommentLikeResult:
        """Execute toggle like flow.

        The viewer must resolve to a stored user before the like is written.

        Args:
            request: Toggle like request

        Returns:
            Envelope with the resulting like state (True = now liked)
        """
        try:
            user_id = require_viewer(request.user_id, "like comments")
            comment_id = CommentId(require_id(request.comment_id, "Comment ID"))
            user = await self.user_service.get_by_id(user_id)
            liked = await self.comment_like_service.toggle_like(comment_id, user.id)
        except DomainError as e:
            logfire.warn("Comment like toggle failed", error=str(e), kind=e.kind.value)
            return CommentFailure.from_error(e)

        return CommentLikeSuccess(liked=liked)
