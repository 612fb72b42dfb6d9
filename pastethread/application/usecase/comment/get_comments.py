"""Get comments use case."""

import logfire
from pydantic import BaseModel

from pastethread.application.usecase.base import BaseUseCase
from pastethread.domain.error import DomainError
from pastethread.domain.service import (
    CommentLikeService,
    CommentService,
    PasteService,
    UserService,
)
from pastethread.domain.value import CommentId, PasteId, UserId

from .common import require_id
from .result import CommentFailure, CommentItem, CommentsResult, CommentsSuccess


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    paste_id: str
    user_id: str | None = None  # Viewer, enables is_liked_by_user


class GetCommentsUseCase(BaseUseCase):
    """Use case for loading the comment forest of a paste."""

    def __init__(
        self,
        comment_service: CommentService,
        comment_like_service: CommentLikeService,
        paste_service: PasteService,
        user_service: UserService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            comment_like_service: Like service for the viewer's like state
            paste_service: Paste domain service
            user_service: User service for author snapshots
        """
        self.comment_service = comment_service
        self.comment_like_service = comment_like_service
        self.paste_service = paste_service
        self.user_service = user_service

    async def execute(self, request: GetCommentsRequest) -> CommentsResult:
        """Execute get comments flow.

        Steps:
        1. Verify the paste exists and is live
        2. Fetch the flat snapshot, tombstones included
        3. Resolve authors and, for a known viewer, their likes
        4. Assemble the forest

        Args:
            request: Get comments request with paste ID and optional viewer

        Returns:
            Envelope with the root comments and nested replies
        """
        try:
            paste_id = PasteId(require_id(request.paste_id, "Paste ID"))
            await self.paste_service.get_live_paste(paste_id)

            comments = await self.comment_service.get_comments_for_paste(paste_id)

            authors = await self.user_service.get_author_snapshots(
                comment.author_id for comment in comments
            )

            liked_ids: set[CommentId] | None = None
            if request.user_id:
                liked_ids = await self.comment_like_service.get_liked_comment_ids(
                    UserId(request.user_id), [comment.id for comment in comments]
                )

            forest = self.comment_service.build_thread(comments, authors, liked_ids)
        except DomainError as e:
            logfire.warn("Loading comments failed", error=str(e), kind=e.kind.value)
            return CommentFailure.from_error(e)

        return CommentsSuccess(comments=[CommentItem.from_domain(root) for root in forest])
