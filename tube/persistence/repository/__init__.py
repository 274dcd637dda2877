"""PostgreSQL repository implementations."""

from tube.persistence.repository.comment import PostgresCommentRepository
from tube.persistence.repository.engagement import PostgresEngagementCounterRepository
from tube.persistence.repository.transaction import PostgresTransactionManager
from tube.persistence.repository.user import PostgresUserRepository
from tube.persistence.repository.video import PostgresVideoRepository
from tube.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresVideoRepository",
    "PostgresCommentRepository",
    "PostgresVoteRepository",
    "PostgresEngagementCounterRepository",
    "PostgresTransactionManager",
]
