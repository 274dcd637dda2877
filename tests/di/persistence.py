"""Mock persistence providers for testing."""

from dishka import Scope, provide

from tube.domain.repository import (
    CommentRepository,
    EngagementCounterRepository,
    TransactionManager,
    UserRepository,
    VideoRepository,
    VoteRepository,
)
from tube.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryEngagementCounterRepository,
    InMemoryTransactionManager,
    InMemoryUserRepository,
    InMemoryVideoRepository,
    InMemoryVoteRepository,
)
from tube.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so state survives across the requests of one test
    client; each test builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_in_memory_video_repository(self) -> InMemoryVideoRepository:
        return InMemoryVideoRepository()

    @provide(scope=Scope.APP)
    def get_in_memory_comment_repository(self) -> InMemoryCommentRepository:
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_in_memory_vote_repository(self) -> InMemoryVoteRepository:
        return InMemoryVoteRepository()

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_video_repository(self, videos: InMemoryVideoRepository) -> VideoRepository:
        """Provide in-memory video repository."""
        return videos

    @provide(scope=Scope.APP)
    def get_comment_repository(
        self, comments: InMemoryCommentRepository
    ) -> CommentRepository:
        """Provide in-memory comment repository."""
        return comments

    @provide(scope=Scope.APP)
    def get_vote_repository(self, votes: InMemoryVoteRepository) -> VoteRepository:
        """Provide in-memory vote repository."""
        return votes

    @provide(scope=Scope.APP)
    def get_engagement_counter_repository(
        self, videos: InMemoryVideoRepository, comments: InMemoryCommentRepository
    ) -> EngagementCounterRepository:
        """Provide counters backed by the in-memory videos and comments."""
        return InMemoryEngagementCounterRepository(videos, comments)

    @provide(scope=Scope.APP)
    def get_transaction_manager(
        self,
        votes: InMemoryVoteRepository,
        videos: InMemoryVideoRepository,
        comments: InMemoryCommentRepository,
    ) -> TransactionManager:
        """Provide lock-and-snapshot transaction manager over the vote state."""
        return InMemoryTransactionManager(votes, videos, comments)
