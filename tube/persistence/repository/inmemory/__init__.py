"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .engagement import InMemoryEngagementCounterRepository
from .session import InMemorySessionStore
from .transaction import InMemoryTransactionManager
from .user import InMemoryUserRepository
from .video import InMemoryVideoRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryEngagementCounterRepository",
    "InMemorySessionStore",
    "InMemoryTransactionManager",
    "InMemoryUserRepository",
    "InMemoryVideoRepository",
    "InMemoryVoteRepository",
]
