"""Paste aggregate root.

Pastes are owned by the paste application; this service only reads them to
check that comments attach to something that exists.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from pastethread.domain.model.common import DomainModel
from pastethread.domain.value import PasteId, PasteVisibility, UserId


class Paste(DomainModel):
    """Paste aggregate root."""

    id: PasteId
    slug: str = Field(min_length=1, max_length=255)
    title: Optional[str] = None
    author_id: Optional[UserId] = None  # None for anonymous pastes
    visibility: PasteVisibility = PasteVisibility.PUBLIC
    is_deleted: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
