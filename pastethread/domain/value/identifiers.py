"""Strongly typed identifiers for pastethread domain entities.

Identifiers are opaque strings issued by whoever creates the record (the
paste application, the auth provider, or this service for comments).
NewType keeps the different kinds from being mixed up.
"""

from typing import NewType

UserId = NewType("UserId", str)
PasteId = NewType("PasteId", str)
CommentId = NewType("CommentId", str)
