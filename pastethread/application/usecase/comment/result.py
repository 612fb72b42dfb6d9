"""Comment response items and result envelopes.

Every comment operation answers with an envelope that is either a success
carrying its data field or a failure carrying a message, never both:

    {"success": true, "comment": {...}}
    {"success": false, "error": "Comment cannot be empty"}

Each family is a union of two models, so a success without data or a
failure without an error cannot be constructed.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pastethread.domain.error import DomainError, ErrorKind
from pastethread.domain.service import CommentTreeNode

# Content shown in place of a deleted comment's text
TOMBSTONE_CONTENT = "[deleted]"


class AuthorItem(BaseModel):
    """Comment author in response."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    image: str | None


class CommentItem(BaseModel):
    """Comment node in response.

    Field names are camelCase on the wire, as the paste frontend expects.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    paste_id: str
    parent_id: str | None
    content: str
    like_count: int
    is_deleted: bool
    created_at: datetime
    updated_at: datetime
    author: AuthorItem | None
    is_liked_by_user: bool | None = None
    replies: list["CommentItem"] = Field(default_factory=list)

    @classmethod
    def from_node(cls, node: CommentTreeNode) -> "CommentItem":
        """Convert a single domain node, without its replies."""
        comment = node.comment
        author = node.author
        return cls(
            id=str(comment.id),
            paste_id=str(comment.paste_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            content=TOMBSTONE_CONTENT if comment.is_deleted else comment.content,
            like_count=comment.like_count,
            is_deleted=comment.is_deleted,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            author=AuthorItem(id=str(author.id), name=author.name, image=author.image)
            if author
            else None,
            is_liked_by_user=node.is_liked_by_user,
        )

    @classmethod
    def from_domain(cls, root: CommentTreeNode) -> "CommentItem":
        """Convert a domain tree to response items.

        Iterates instead of recursing so long reply chains convert safely.

        Args:
            root: Root of a domain comment tree

        Returns:
            Response item with replies converted in order
        """
        items: dict[str, CommentItem] = {}
        for node in root.walk():
            item = cls.from_node(node)
            items[item.id] = item
            if node is not root:
                items[str(node.parent_id)].replies.append(item)
        return items[str(root.id)]


class Envelope(BaseModel):
    """Base for result envelopes; unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")


class CommentFailure(Envelope):
    """Failed comment operation.

    ``kind`` is internal and never serialized; the interface layer uses
    it to pick a status code.
    """

    success: Literal[False] = False
    error: str = Field(min_length=1)
    kind: ErrorKind = Field(default=ErrorKind.VALIDATION, exclude=True)

    @classmethod
    def from_error(cls, error: DomainError) -> "CommentFailure":
        """Build a failure envelope from a domain error."""
        return cls(error=str(error) or type(error).__name__, kind=error.kind)


class CommentActionSuccess(Envelope):
    """Created, updated or deleted comment."""

    success: Literal[True] = True
    comment: CommentItem


class CommentLikeSuccess(Envelope):
    """Like state after a toggle."""

    success: Literal[True] = True
    liked: bool


class CommentsSuccess(Envelope):
    """Comment forest of a paste."""

    success: Literal[True] = True
    comments: list[CommentItem]


class CommentCountSuccess(Envelope):
    """Number of live comments on a paste."""

    success: Literal[True] = True
    count: int = Field(ge=0)


CommentActionResult = CommentActionSuccess | CommentFailure
CommentLikeResult = CommentLikeSuccess | CommentFailure
CommentsResult = CommentsSuccess | CommentFailure
CommentCountResult = CommentCountSuccess | CommentFailure
