"""Domain model entities for pastethread."""

from pastethread.domain.model.comment import Comment
from pastethread.domain.model.comment_like import CommentLike
from pastethread.domain.model.paste import Paste
from pastethread.domain.model.user import User

__all__ = [
    "User",
    "Paste",
    "Comment",
    "CommentLike",
]
