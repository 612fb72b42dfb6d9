"""Get comment count use case."""

import logfire
from pydantic import BaseModel

from pastethread.application.usecase.base import BaseUseCase
from pastethread.domain.error import DomainError
from pastethread.domain.service import CommentService, PasteService
from pastethread.domain.value import PasteId

from .common import require_id
from .result import CommentCountResult, CommentCountSuccess, CommentFailure


class GetCommentCountRequest(BaseModel):
    """Get comment count request."""

    paste_id: str


class GetCommentCountUseCase(BaseUseCase):
    """Use case for counting the live comments of a paste."""

    def __init__(
        self, comment_service: CommentService, paste_service: PasteService
    ) -> None:
        """Initialize get comment count use case.

        Args:
            comment_service: Comment domain service
            paste_service: Paste domain service
        """
        self.comment_service = comment_service
        self.paste_service = paste_service

    async def execute(self, request: GetCommentCountRequest) -> CommentCountResult:
        """Execute get comment count flow.

        Tombstones are not counted. A missing or deleted paste fails the
        same way it does when listing its comments.

        Args:
            request: Get comment count request

        Returns:
            Envelope with the comment count
        """
        try:
            paste_id = PasteId(require_id(request.paste_id, "Paste ID"))
            await self.paste_service.get_live_paste(paste_id)
            count = await self.comment_service.count_for_paste(paste_id)
        except DomainError as e:
            logfire.warn("Counting comments failed", error=str(e), kind=e.kind.value)
            return CommentFailure.from_error(e)

        return CommentCountSuccess(count=count)
