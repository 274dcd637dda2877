"""Vote entity.

A vote is a user's current like/dislike stance on one video or comment.
Each user holds at most one vote per target.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from tube.domain.model.common import DomainModel
from tube.domain.value import TargetType, UserId, VoteId, VoteKind


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per (user, target type, target id), enforced by a database
      unique constraint
    - Casting the same kind again deletes the vote
    - Casting the opposite kind changes ``kind`` in place
    """

    id: VoteId
    user_id: UserId
    target_type: TargetType
    target_id: UUID  # VideoId or CommentId (both are UUIDs)
    kind: VoteKind
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class VoteUpdate(DomainModel):
    """The mutable part of a vote.

    Repositories apply exactly these fields and nothing else.
    """

    kind: VoteKind


class EngagementCounters(DomainModel):
    """Snapshot of a target's like/dislike counters."""

    likes_count: int = Field(default=0, ge=0)
    dislikes_count: int = Field(default=0, ge=0)
