"""Domain layer DI providers."""

from dishka import Scope, provide

from pastethread.config import AuthSettings, CommentSettings
from pastethread.domain.repository import (
    CommentLikeRepository,
    CommentRepository,
    PasteRepository,
    UserRepository,
)
from pastethread.domain.service import (
    CommentLikeService,
    CommentService,
    JWTService,
    PasteService,
    UserService,
)
from pastethread.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, settings: CommentSettings
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository, settings=settings)

    @provide
    def get_comment_like_service(
        self,
        comment_like_repository: CommentLikeRepository,
        comment_service: CommentService,
    ) -> CommentLikeService:
        """Provide comment like domain service."""
        return CommentLikeService(
            comment_like_repository=comment_like_repository,
            comment_service=comment_service,
        )

    @provide
    def get_paste_service(self, paste_repository: PasteRepository) -> PasteService:
        """Provide paste domain service."""
        return PasteService(paste_repository=paste_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)
