"""PostgreSQL implementation of Comment repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from tube.domain.model import Comment
from tube.domain.repository import CommentRepository
from tube.domain.value import CommentId
from tube.persistence.mappers import comment_to_dict, row_to_comment
from tube.persistence.tables import comments_table


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
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update content)."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        stmt = stmt.on_conflict_do_update(
            index_elements=[comments_table.c.id],
            set_={"content": stmt.excluded.content},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return comment
