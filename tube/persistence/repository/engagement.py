"""PostgreSQL implementation of the engagement counter repository."""

from typing import Optional

from sqlalchemy import Table, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tube.domain.model import EngagementCounters
from tube.domain.repository import EngagementCounterRepository
from tube.domain.value import CounterField, TargetRef, TargetType
from tube.persistence.tables import comments_table, videos_table


def _table_for(target_type: TargetType) -> Table:
    return videos_table if target_type is TargetType.VIDEO else comments_table


class PostgresEngagementCounterRepository(EngagementCounterRepository):
    """Counters live as columns on the videos and comments tables."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def apply_delta(
        self, target: TargetRef, field: CounterField, delta: int, floor: int = 0
    ) -> None:
        """Atomically add a delta in SQL: ``col = GREATEST(col + delta, floor)``."""
        table = _table_for(target.target_type)
        column = table.c[field.value]
        stmt = (
            update(table)
            .where(table.c.id == target.target_id)
            .values({column: func.greatest(column + delta, floor)})
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def get_counters(
        self, target: TargetRef, for_update: bool = False
    ) -> Optional[EngagementCounters]:
        """Read the counters of a video or comment, optionally locking its row."""
        table = _table_for(target.target_type)
        stmt = select(table.c.likes_count, table.c.dislikes_count).where(
            table.c.id == target.target_id
        )
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return EngagementCounters(**row) if row else None

    async def set_counters(
        self, target: TargetRef, counters: EngagementCounters
    ) -> None:
        """Overwrite the counters of a video or comment."""
        table = _table_for(target.target_type)
        stmt = (
            update(table)
            .where(table.c.id == target.target_id)
            .values(
                likes_count=counters.likes_count,
                dislikes_count=counters.dislikes_count,
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
