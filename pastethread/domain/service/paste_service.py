"""Paste domain service."""

import logfire

from pastethread.domain.error import ContentDeletedError, NotFoundError
from pastethread.domain.model.paste import Paste
from pastethread.domain.repository import PasteRepository
from pastethread.domain.value import PasteId

from .base import Service


class PasteService(Service):
    """Domain service for paste lookups."""

    def __init__(self, paste_repository: PasteRepository) -> None:
        """Initialize paste service.

        Args:
            paste_repository: Paste repository
        """
        self.paste_repository = paste_repository

    async def get_paste_by_id(self, paste_id: PasteId) -> Paste | None:
        """Get a paste by ID.

        Args:
            paste_id: Paste ID

        Returns:
            Paste if found, None otherwise
        """
        with logfire.span("paste_service.get_paste_by_id", paste_id=str(paste_id)):
            paste = await self.paste_repository.find_by_id(paste_id)

            if paste:
                logfire.info("Paste found", paste_id=str(paste_id))
            else:
                logfire.warn("Paste not found", paste_id=str(paste_id))

            return paste

    async def get_live_paste(self, paste_id: PasteId) -> Paste:
        """Get a paste that can receive comments.

        Args:
            paste_id: Paste ID

        Returns:
            The paste

        Raises:
            NotFoundError: If the paste does not exist
            ContentDeletedError: If the paste was deleted
        """
        paste = await self.get_paste_by_id(paste_id)
        if paste is None:
            raise NotFoundError("Paste", str(paste_id))
        if paste.is_deleted:
            raise ContentDeletedError("Paste", str(paste_id))
        return paste
