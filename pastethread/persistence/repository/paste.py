"""PostgreSQL implementation of Paste repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from pastethread.domain.model import Paste
from pastethread.domain.repository import PasteRepository
from pastethread.domain.value import PasteId
from pastethread.persistence.mappers import paste_to_dict, row_to_paste
from pastethread.persistence.tables import pastes_table


class PostgresPasteRepository(PasteRepository):
    """PostgreSQL implementation of PasteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, paste_id: PasteId) -> Optional[Paste]:
        """Find a paste by ID."""
        stmt = select(pastes_table).where(pastes_table.c.id == paste_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_paste(dict(row)) if row else None

    async def save(self, paste: Paste) -> Paste:
        """Save a paste (upsert on ID)."""
        values = paste_to_dict(paste)
        stmt = insert(pastes_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[pastes_table.c.id],
            set_={k: v for k, v in values.items() if k != "id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return paste
