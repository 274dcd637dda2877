"""In-memory video repository for testing."""

from typing import Optional

from tube.domain.model.video import Video
from tube.domain.repository.video import VideoRepository
from tube.domain.value import VideoId


class InMemoryVideoRepository(VideoRepository):
    """In-memory implementation of VideoRepository for testing."""

    def __init__(self) -> None:
        self._videos: dict[VideoId, Video] = {}

    async def find_by_id(self, video_id: VideoId) -> Optional[Video]:
        """Find a video by ID."""
        return self._videos.get(video_id)

    async def save(self, video: Video) -> Video:
        """Save a video. Existing counters are kept on update."""
        existing = self._videos.get(video.id)
        if existing:
            video = existing.model_copy(update={"title": video.title})
        self._videos[video.id] = video
        return video

    def snapshot(self) -> dict[VideoId, Video]:
        """Copy of the current state (models are immutable)."""
        return dict(self._videos)

    def restore(self, state: dict[VideoId, Video]) -> None:
        """Reset to a snapshot."""
        self._videos = dict(state)
