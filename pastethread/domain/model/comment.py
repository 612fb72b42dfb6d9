"""Comment entity.

Comments are threaded discussions attached to a paste. Replies reference
their parent through parent_id; the nested view is assembled on read by
the comment tree builder rather than stored.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from pastethread.domain.model.common import DomainModel
from pastethread.domain.value import CommentId, PasteId, UserId


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a paste or a reply to another comment.

    Lifecycle:
    - paste_id never changes after creation
    - is_deleted marks a tombstone; the record is kept so replies stay attached
    - author_id becomes None when the authoring account is removed
    """

    id: CommentId
    paste_id: PasteId
    author_id: Optional[UserId] = None
    content: str
    parent_id: Optional[CommentId] = None
    like_count: int = Field(default=0, ge=0)
    is_deleted: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
