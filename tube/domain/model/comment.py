"""Comment entity."""

from datetime import datetime

from pydantic import Field

from tube.domain.model.common import DomainModel
from tube.domain.value import CommentId, UserId, VideoId


class Comment(DomainModel):
    """Comment on a video, with denormalized like/dislike counters."""

    id: CommentId
    video_id: VideoId
    user_id: UserId
    content: str = Field(min_length=1)
    likes_count: int = Field(default=0, ge=0)
    dislikes_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
