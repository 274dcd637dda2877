"""In-memory engagement counter repository for testing."""

from typing import Optional

from tube.domain.model import Comment, EngagementCounters, Video
from tube.domain.repository.engagement import EngagementCounterRepository
from tube.domain.value import CommentId, CounterField, TargetRef, TargetType, VideoId

from .comment import InMemoryCommentRepository
from .video import InMemoryVideoRepository


class InMemoryEngagementCounterRepository(EngagementCounterRepository):
    """Counters are kept on the entities held by the video/comment fakes."""

    def __init__(
        self,
        video_repository: InMemoryVideoRepository,
        comment_repository: InMemoryCommentRepository,
    ) -> None:
        self.video_repository = video_repository
        self.comment_repository = comment_repository

    def _get(self, target: TargetRef) -> Video | Comment | None:
        if target.target_type is TargetType.VIDEO:
            return self.video_repository._videos.get(VideoId(target.target_id))
        return self.comment_repository._comments.get(CommentId(target.target_id))

    def _put(self, entity: Video | Comment) -> None:
        if isinstance(entity, Video):
            self.video_repository._videos[entity.id] = entity
        else:
            self.comment_repository._comments[entity.id] = entity

    async def apply_delta(
        self, target: TargetRef, field: CounterField, delta: int, floor: int = 0
    ) -> None:
        """Add a delta, clamped at ``floor``. Missing targets are ignored."""
        entity = self._get(target)
        if entity is None:
            return
        value = max(getattr(entity, field.value) + delta, floor)
        self._put(entity.model_copy(update={field.value: value}))

    async def get_counters(
        self, target: TargetRef, for_update: bool = False
    ) -> Optional[EngagementCounters]:
        """Read the counters of a target.

        ``for_update`` is ignored, the in-memory transaction lock already
        serializes writers.
        """
        entity = self._get(target)
        if entity is None:
            return None
        return EngagementCounters(
            likes_count=entity.likes_count, dislikes_count=entity.dislikes_count
        )

    async def set_counters(
        self, target: TargetRef, counters: EngagementCounters
    ) -> None:
        """Overwrite the counters of a target."""
        entity = self._get(target)
        if entity is None:
            return
        self._put(
            entity.model_copy(
                update={
                    "likes_count": counters.likes_count,
                    "dislikes_count": counters.dislikes_count,
                }
            )
        )
