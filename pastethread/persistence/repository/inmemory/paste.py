"""In-memory paste repository for testing."""

from typing import Optional

from pastethread.domain.model.paste import Paste
from pastethread.domain.repository.paste import PasteRepository
from pastethread.domain.value import PasteId


class InMemoryPasteRepository(PasteRepository):
    """In-memory implementation of PasteRepository for testing."""

    def __init__(self) -> None:
        self._pastes: dict[PasteId, Paste] = {}

    async def find_by_id(self, paste_id: PasteId) -> Optional[Paste]:
        """Find a paste by ID."""
        return self._pastes.get(paste_id)

    async def save(self, paste: Paste) -> Paste:
        """Save or update a paste."""
        self._pastes[paste.id] = paste
        return paste
