"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from pastethread.domain.model import Comment
from pastethread.domain.repository import CommentRepository
from pastethread.domain.value import CommentId, PasteId
from pastethread.persistence.mappers import comment_to_dict, row_to_comment
from pastethread.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_paste(
        self,
        paste_id: PasteId,
        include_deleted: bool = True,
    ) -> List[Comment]:
        """Find all comments for a paste, oldest first."""
        stmt = select(comments_table).where(comments_table.c.paste_id == paste_id)

        if not include_deleted:
            stmt = stmt.where(comments_table.c.is_deleted.is_(False))

        stmt = stmt.order_by(comments_table.c.created_at, comments_table.c.id)

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a new comment."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Update the content of a live comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.is_deleted.is_(False))
            .values(content=content, updated_at=datetime.now())
            .returning(comments_table)
        )

        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            # Comment not found or deleted
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def mark_deleted(self, comment_id: CommentId) -> Optional[Comment]:
        """Turn a live comment into a tombstone."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.is_deleted.is_(False))
            .values(is_deleted=True, updated_at=datetime.now())
            .returning(comments_table)
        )

        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def increment_like_count(self, comment_id: CommentId) -> None:
        """Atomically increment like count by 1."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(like_count=comments_table.c.like_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def decrement_like_count(self, comment_id: CommentId) -> None:
        """Atomically decrement like count by 1 (minimum 0)."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.like_count > 0)  # Don't go below 0
            .values(like_count=comments_table.c.like_count - 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def count_by_paste(self, paste_id: PasteId) -> int:
        """Count comments for a paste (excluding deleted)."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.paste_id == paste_id)
            .where(comments_table.c.is_deleted.is_(False))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
