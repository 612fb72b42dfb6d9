"""Paste repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from pastethread.domain.model.paste import Paste
from pastethread.domain.value import PasteId


class PasteRepository(ABC):
    """Repository for Paste aggregate."""

    @abstractmethod
    async def find_by_id(self, paste_id: PasteId) -> Optional[Paste]:
        """Find a paste by ID.

        Args:
            paste_id: The paste's unique identifier

        Returns:
            The paste if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, paste: Paste) -> Paste:
        """Save a paste (create or update).

        Args:
            paste: The paste to save

        Returns:
            The saved paste
        """
        pass
