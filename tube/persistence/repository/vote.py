"""PostgreSQL implementation of Vote repository."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tube.domain.model import Vote, VoteUpdate
from tube.domain.repository import VoteRepository
from tube.domain.value import TargetType, UserId, VoteId, VoteKind
from tube.persistence.mappers import row_to_vote, vote_to_dict
from tube.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: TargetType,
        target_id: UUID,
        for_update: bool = False,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific target."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.target_type == target_type.value,
                votes_table.c.target_id == target_id,
            )
        )
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_vote(dict(row)) if row else None

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote. The unique constraint rejects a second vote."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def update(self, vote_id: VoteId, changes: VoteUpdate) -> Optional[Vote]:
        """Apply a VoteUpdate to an existing vote."""
        stmt = (
            update(votes_table)
            .where(votes_table.c.id == vote_id)
            .values(kind=changes.kind.value, updated_at=datetime.now())
            .returning(votes_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_vote(dict(row)) if row else None

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote."""
        stmt = delete(votes_table).where(votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_target(
        self, target_type: TargetType, target_id: UUID, kind: VoteKind
    ) -> int:
        """Count votes of one kind on a target."""
        stmt = select(func.count()).where(
            and_(
                votes_table.c.target_type == target_type.value,
                votes_table.c.target_id == target_id,
                votes_table.c.kind == kind.value,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
