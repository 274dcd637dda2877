"""Video entity.

Videos are owned by the catalogue; this service only reads their existence
and maintains the engagement counters stored on them.
"""

from datetime import datetime

from pydantic import Field

from tube.domain.model.common import DomainModel
from tube.domain.value import UserId, VideoId


class Video(DomainModel):
    """Video entity with denormalized like/dislike counters."""

    id: VideoId
    user_id: UserId
    title: str = Field(min_length=1, max_length=255)
    likes_count: int = Field(default=0, ge=0)
    dislikes_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
