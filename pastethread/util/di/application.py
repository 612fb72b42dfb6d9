"""Application layer DI providers."""

from dishka import Scope, provide

from pastethread.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentCountUseCase,
    GetCommentsUseCase,
    ToggleCommentLikeUseCase,
    UpdateCommentUseCase,
)
from pastethread.domain.service import (
    CommentLikeService,
    CommentService,
    PasteService,
    UserService,
)
from pastethread.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    @provide
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        paste_service: PasteService,
        user_service: UserService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            paste_service=paste_service,
            user_service=user_service,
        )

    @provide
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        comment_like_service: CommentLikeService,
        paste_service: PasteService,
        user_service: UserService,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            comment_like_service=comment_like_service,
            paste_service=paste_service,
            user_service=user_service,
        )

    @provide
    def get_get_comment_count_use_case(
        self, comment_service: CommentService, paste_service: PasteService
    ) -> GetCommentCountUseCase:
        """Provide get comment count use case."""
        return GetCommentCountUseCase(
            comment_service=comment_service, paste_service=paste_service
        )

    @provide
    def get_update_comment_use_case(
        self,
        comment_service: CommentService,
        comment_like_service: CommentLikeService,
        user_service: UserService,
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service,
            comment_like_service=comment_like_service,
            user_service=user_service,
        )

    @provide
    def get_delete_comment_use_case(
        self,
        comment_service: CommentService,
        comment_like_service: CommentLikeService,
        user_service: UserService,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service,
            comment_like_service=comment_like_service,
            user_service=user_service,
        )

    @provide
    def get_toggle_comment_like_use_case(
        self,
        comment_like_service: CommentLikeService,
        user_service: UserService,
    ) -> ToggleCommentLikeUseCase:
        """Provide toggle comment like use case."""
        return ToggleCommentLikeUseCase(
            comment_like_service=comment_like_service,
            user_service=user_service,
        )
