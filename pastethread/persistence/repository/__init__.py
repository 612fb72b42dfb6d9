"""PostgreSQL repository implementations."""

from pastethread.persistence.repository.comment import PostgresCommentRepository
from pastethread.persistence.repository.comment_like import (
    PostgresCommentLikeRepository,
)
from pastethread.persistence.repository.paste import PostgresPasteRepository
from pastethread.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPasteRepository",
    "PostgresCommentRepository",
    "PostgresCommentLikeRepository",
]
