"""Repository interfaces for the pastethread domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from pastethread.domain.repository.comment import CommentRepository
from pastethread.domain.repository.comment_like import CommentLikeRepository
from pastethread.domain.repository.paste import PasteRepository
from pastethread.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PasteRepository",
    "CommentRepository",
    "CommentLikeRepository",
]
