"""Domain value objects for pastethread."""

from pastethread.domain.value.identifiers import CommentId, PasteId, UserId
from pastethread.domain.value.types import (
    AuthorSnapshot,
    OrphanPolicy,
    PasteVisibility,
    SiblingOrder,
)

__all__ = [
    # Identifiers
    "UserId",
    "PasteId",
    "CommentId",
    # Types
    "AuthorSnapshot",
    "OrphanPolicy",
    "PasteVisibility",
    "SiblingOrder",
]
