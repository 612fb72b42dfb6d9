"""Domain value objects for pastethread.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import Field

from pastethread.domain.value.common import ValueObject
from pastethread.domain.value.identifiers import UserId


class SiblingOrder(str, Enum):
    """Ordering applied to root comments and to every reply list."""

    INPUT = "input"  # Keep the order of the flat snapshot
    CREATED_AT = "created_at"  # Oldest first
    LIKE_COUNT = "like_count"  # Most liked first, oldest first on ties


class OrphanPolicy(str, Enum):
    """What to do with a comment whose parent is missing from the snapshot.

    A parent can be absent when a paginated query cuts off an ancestor.
    """

    PROMOTE = "promote"  # Treat the orphan as a root comment
    DROP = "drop"  # Omit the orphan and its whole subtree
    FAIL = "fail"  # Reject the snapshot as malformed


class PasteVisibility(str, Enum):
    """Visibility of a paste."""

    PUBLIC = "public"
    UNLISTED = "unlisted"
    PRIVATE = "private"


class AuthorSnapshot(ValueObject):
    """Public view of a comment author at read time."""

    id: UserId
    name: str = Field(min_length=1, max_length=255)
    image: str | None = None
