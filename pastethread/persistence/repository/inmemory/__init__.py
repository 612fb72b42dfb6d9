"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .comment_like import InMemoryCommentLikeRepository
from .paste import InMemoryPasteRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentLikeRepository",
    "InMemoryCommentRepository",
    "InMemoryPasteRepository",
    "InMemoryUserRepository",
]
