"""Repository interfaces for Tube domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from tube.domain.repository.comment import CommentRepository
from tube.domain.repository.engagement import EngagementCounterRepository
from tube.domain.repository.session import SessionStore
from tube.domain.repository.transaction import TransactionManager
from tube.domain.repository.user import UserRepository
from tube.domain.repository.video import VideoRepository
from tube.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "VideoRepository",
    "CommentRepository",
    "VoteRepository",
    "EngagementCounterRepository",
    "TransactionManager",
    "SessionStore",
]
