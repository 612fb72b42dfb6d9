"""PostgreSQL implementation of CommentLike repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from pastethread.domain.model import CommentLike
from pastethread.domain.repository import CommentLikeRepository
from pastethread.domain.value import CommentId, UserId
from pastethread.persistence.mappers import comment_like_to_dict, row_to_comment_like
from pastethread.persistence.tables import comment_likes_table


class PostgresCommentLikeRepository(CommentLikeRepository):
    """PostgreSQL implementation of CommentLikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[CommentLike]:
        """Find a user's like on a specific comment."""
        stmt = select(comment_likes_table).where(
            and_(
                comment_likes_table.c.user_id == user_id,
                comment_likes_table.c.comment_id == comment_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment_like(row._asdict()) if row else None

    async def find_by_user_and_comments(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> List[CommentLike]:
        """Find a user's likes on multiple comments (batch query)."""
        if not comment_ids:
            return []

        stmt = select(comment_likes_table).where(
            and_(
                comment_likes_table.c.user_id == user_id,
                comment_likes_table.c.comment_id.in_(comment_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_comment_like(row._asdict()) for row in result.fetchall()]

    async def save(self, like: CommentLike) -> CommentLike:
        """Save a like.

        Raises:
            IntegrityError: If the user already liked the comment
        """
        stmt = insert(comment_likes_table).values(**comment_like_to_dict(like))
        # Savepoint, so a duplicate leaves the request transaction usable
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return like

    async def delete_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> bool:
        """Delete a like by user and comment."""
        stmt = delete(comment_likes_table).where(
            and_(
                comment_likes_table.c.user_id == user_id,
                comment_likes_table.c.comment_id == comment_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
