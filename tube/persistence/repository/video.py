"""PostgreSQL implementation of Video repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from tube.domain.model import Video
from tube.domain.repository import VideoRepository
from tube.domain.value import VideoId
from tube.persistence.mappers import row_to_video, video_to_dict
from tube.persistence.tables import videos_table


class PostgresVideoRepository(VideoRepository):
    """PostgreSQL implementation of VideoRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, video_id: VideoId) -> Optional[Video]:
        """Find a video by ID."""
        stmt = select(videos_table).where(videos_table.c.id == video_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_video(dict(row)) if row else None

    async def save(self, video: Video) -> Video:
        """Save a video (create or update title).

        Counters are left untouched on update; they only change through
        the engagement counter repository.
        """
        stmt = insert(videos_table).values(**video_to_dict(video))
        stmt = stmt.on_conflict_do_update(
            index_elements=[videos_table.c.id],
            set_={"title": stmt.excluded.title},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return video
