"""Comment like entity.

A like is a relation between a user and a comment. Each user can like a
given comment at most once (enforced by a unique constraint).
"""

from datetime import datetime

from pydantic import Field

from pastethread.domain.model.common import DomainModel
from pastethread.domain.value import CommentId, UserId


class CommentLike(DomainModel):
    """Like of a comment by a user."""

    comment_id: CommentId
    user_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
