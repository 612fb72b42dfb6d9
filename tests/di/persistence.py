"""Mock persistence providers for testing."""

from dishka import Scope, provide

from pastethread.domain.repository import (
    CommentLikeRepository,
    CommentRepository,
    PasteRepository,
    UserRepository,
)
from pastethread.persistence.repository.inmemory import (
    InMemoryCommentLikeRepository,
    InMemoryCommentRepository,
    InMemoryPasteRepository,
    InMemoryUserRepository,
)
from pastethread.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so data written in one request is visible to
    the next (API tests seed data, then call endpoints). Every test builds a
    fresh container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_paste_repository(self) -> PasteRepository:
        """Provide in-memory paste repository."""
        return InMemoryPasteRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_comment_like_repository(self) -> CommentLikeRepository:
        """Provide in-memory comment like repository."""
        return InMemoryCommentLikeRepository()
