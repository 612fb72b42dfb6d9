"""User entity.

Accounts are managed by the external auth provider. Only the fields needed
to render comment authors are modelled here.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from pastethread.domain.model.common import DomainModel
from pastethread.domain.value import AuthorSnapshot, UserId


class User(DomainModel):
    """User account."""

    id: UserId
    name: str = Field(min_length=1, max_length=255)
    email: Optional[str] = None
    image: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def to_author(self) -> AuthorSnapshot:
        """Snapshot of the public author fields."""
        return AuthorSnapshot(id=self.id, name=self.name, image=self.image)
