"""Domain model entities for Tube."""

from tube.domain.model.comment import Comment
from tube.domain.model.user import User
from tube.domain.model.video import Video
from tube.domain.model.vote import EngagementCounters, Vote, VoteUpdate

__all__ = [
    "User",
    "Video",
    "Comment",
    "Vote",
    "VoteUpdate",
    "EngagementCounters",
]
