"""Unit tests for EngagementLedger."""

import asyncio
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from tube.config import EngagementSettings
from tube.domain.error import NotFoundError, TransientError
from tube.domain.model import EngagementCounters
from tube.domain.repository import (
    CommentRepository,
    EngagementCounterRepository,
    VideoRepository,
    VoteRepository,
)
from tube.domain.service import EngagementLedger
from tube.domain.value import (
    TargetRef,
    TargetType,
    UserId,
    VoteKind,
    VoteOutcome,
)
from tube.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryEngagementCounterRepository,
    InMemoryTransactionManager,
    InMemoryVideoRepository,
    InMemoryVoteRepository,
)
from tests.conftest import make_comment, make_video
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed_video(unit_env) -> TargetRef:
    video_repo = await unit_env.get(VideoRepository)
    video = await video_repo.save(make_video())
    return TargetRef(target_type=TargetType.VIDEO, target_id=video.id)


async def _votes_on(vote_repo: VoteRepository, target: TargetRef) -> tuple[int, int]:
    likes = await vote_repo.count_by_target(
        target.target_type, target.target_id, VoteKind.LIKE
    )
    dislikes = await vote_repo.count_by_target(
        target.target_type, target.target_id, VoteKind.DISLIKE
    )
    return likes, dislikes


class TestCastVote:
    """Tests for the vote state machine."""

    @pytest.mark.asyncio
    async def test_first_like_records_vote(self, unit_env):
        """A first like should record a vote and add one like."""
        # Arrange
        ledger = await unit_env.get(EngagementLedger)
        target = await _seed_video(unit_env)
        user_id = UserId(uuid4())

        # Act
        result = await ledger.cast_vote(user_id, target, VoteKind.LIKE)

        # Assert
        assert result.outcome == VoteOutcome.RECORDED
        assert result.vote is not None
        assert result.vote.kind == VoteKind.LIKE
        assert result.counters == EngagementCounters(likes_count=1, dislikes_count=0)

    @pytest.mark.asyncio
    async def test_double_toggle_returns_to_no_vote(self, unit_env):
        """Liking twice should remove the vote and restore the counters."""
        ledger = await unit_env.get(EngagementLedger)
        vote_repo = await unit_env.get(VoteRepository)
        target = await _seed_video(unit_env)
        user_id = UserId(uuid4())

        await ledger.cast_vote(user_id, target, VoteKind.LIKE)
        result = await ledger.cast_vote(user_id, target, VoteKind.LIKE)

        assert result.outcome == VoteOutcome.RETRACTED
        assert result.vote is None
        assert result.counters == EngagementCounters()
        assert (
            await vote_repo.find_by_user_and_target(
                user_id, target.target_type, target.target_id
            )
            is None
        )

    @pytest.mark.asyncio
    async def test_like_then_dislike_switches(self, unit_env):
        """Disliking a liked target should move the vote, not add one."""
        ledger = await unit_env.get(EngagementLedger)
        vote_repo = await unit_env.get(VoteRepository)
        target = await _seed_video(unit_env)
        user_id = UserId(uuid4())

        await ledger.cast_vote(user_id, target, VoteKind.LIKE)
        result = await ledger.cast_vote(user_id, target, VoteKind.DISLIKE)

        assert result.outcome == VoteOutcome.SWITCHED
        assert result.vote is not None
        assert result.vote.kind == VoteKind.DISLIKE
        assert result.counters == EngagementCounters(likes_count=0, dislikes_count=1)
        assert await _votes_on(vote_repo, target) == (0, 1)

    @pytest.mark.asyncio
    async def test_dislike_then_like_switches_back(self, unit_env):
        """Liking a disliked target should switch the vote to like."""
        ledger = await unit_env.get(EngagementLedger)
        target = await _seed_video(unit_env)
        user_id = UserId(uuid4())

        await ledger.cast_vote(user_id, target, VoteKind.DISLIKE)
        result = await ledger.cast_vote(user_id, target, VoteKind.LIKE)

        assert result.outcome == VoteOutcome.SWITCHED
        assert result.counters == EngagementCounters(likes_count=1, dislikes_count=0)

    @pytest.mark.asyncio
    async def test_comment_votes(self, unit_env):
        """Comments should support likes and dislikes like videos."""
        ledger = await unit_env.get(EngagementLedger)
        video_repo = await unit_env.get(VideoRepository)
        comment_repo = await unit_env.get(CommentRepository)
        video = await video_repo.save(make_video())
        comment = await comment_repo.save(make_comment(video.id))
        target = TargetRef(target_type=TargetType.COMMENT, target_id=comment.id)

        await ledger.cast_vote(UserId(uuid4()), target, VoteKind.LIKE)
        result = await ledger.cast_vote(UserId(uuid4()), target, VoteKind.DISLIKE)

        assert result.counters == EngagementCounters(likes_count=1, dislikes_count=1)
        video_counters = await ledger.get_counters(
            TargetRef(target_type=TargetType.VIDEO, target_id=video.id)
        )
        assert video_counters == EngagementCounters()

    @pytest.mark.asyncio
    async def test_missing_target_not_found(self, unit_env):
        """Voting on a target that does not exist should raise NotFoundError."""
        ledger = await unit_env.get(EngagementLedger)
        vote_repo = await unit_env.get(VoteRepository)
        target = TargetRef(target_type=TargetType.VIDEO, target_id=uuid4())

        with pytest.raises(NotFoundError, match="Video"):
            await ledger.cast_vote(UserId(uuid4()), target, VoteKind.LIKE)
        assert await _votes_on(vote_repo, target) == (0, 0)

    @pytest.mark.asyncio
    async def test_counters_match_votes_after_mixed_activity(self, unit_env):
        """Counters should equal vote counts after a sequence of casts."""
        ledger = await unit_env.get(EngagementLedger)
        vote_repo = await unit_env.get(VoteRepository)
        target = await _seed_video(unit_env)
        users = [UserId(uuid4()) for _ in range(4)]
        casts = [
            (users[0], VoteKind.LIKE),
            (users[1], VoteKind.LIKE),
            (users[2], VoteKind.DISLIKE),
            (users[0], VoteKind.DISLIKE),
            (users[1], VoteKind.LIKE),
            (users[3], VoteKind.LIKE),
        ]

        for user_id, kind in casts:
            await ledger.cast_vote(user_id, target, kind)

        counters = await ledger.get_counters(target)
        assert (counters.likes_count, counters.dislikes_count) == await _votes_on(
            vote_repo, target
        )
        assert counters == EngagementCounters(likes_count=1, dislikes_count=2)


class TestConcurrentVotes:
    """Tests for concurrent casts."""

    @pytest.mark.asyncio
    async def test_same_user_concurrent_likes_never_add_n(self, unit_env):
        """N concurrent likes from one user should serialize into toggles."""
        # Arrange
        ledger = await unit_env.get(EngagementLedger)
        vote_repo = await unit_env.get(VoteRepository)
        target = await _seed_video(unit_env)
        user_id = UserId(uuid4())

        # Act
        await asyncio.gather(
            *(ledger.cast_vote(user_id, target, VoteKind.LIKE) for _ in range(5))
        )

        # Assert - odd number of toggles ends liked
        counters = await ledger.get_counters(target)
        assert counters == EngagementCounters(likes_count=1, dislikes_count=0)
        assert await _votes_on(vote_repo, target) == (1, 0)

    @pytest.mark.asyncio
    async def test_many_users_concurrent_likes_all_count(self, unit_env):
        """Concurrent likes from distinct users should all be counted."""
        ledger = await unit_env.get(EngagementLedger)
        target = await _seed_video(unit_env)

        await asyncio.gather(
            *(
                ledger.cast_vote(UserId(uuid4()), target, VoteKind.LIKE)
                for _ in range(10)
            )
        )

        counters = await ledger.get_counters(target)
        assert counters.likes_count == 10


class RacingVoteRepository(InMemoryVoteRepository):
    """Vote repository whose first ``conflicts`` inserts hit the unique constraint."""

    def __init__(self, conflicts: int) -> None:
        super().__init__()
        self.conflicts = conflicts

    async def save(self, vote):
        if self.conflicts > 0:
            self.conflicts -= 1
            raise IntegrityError("uq_votes_user_target", None, Exception())
        return await super().save(vote)


class StallingVoteRepository(InMemoryVoteRepository):
    """Vote repository whose first ``stalls`` lookups hang."""

    def __init__(self, stalls: int) -> None:
        super().__init__()
        self.stalls = stalls

    async def find_by_user_and_target(self, *args, **kwargs):
        if self.stalls > 0:
            self.stalls -= 1
            await asyncio.sleep(10)
        return await super().find_by_user_and_target(*args, **kwargs)


def _ledger(
    vote_repo: InMemoryVoteRepository, max_attempts: int = 3, timeout: float = 1.0
) -> tuple[EngagementLedger, InMemoryVideoRepository]:
    videos = InMemoryVideoRepository()
    comments = InMemoryCommentRepository()
    ledger = EngagementLedger(
        vote_repository=vote_repo,
        counter_repository=InMemoryEngagementCounterRepository(videos, comments),
        transaction_manager=InMemoryTransactionManager(vote_repo, videos, comments),
        video_repository=videos,
        comment_repository=comments,
        engagement_settings=EngagementSettings(
            max_attempts=max_attempts, timeout_seconds=timeout
        ),
    )
    return ledger, videos


class TestRetries:
    """Tests for conflict retries and timeouts."""

    @pytest.mark.asyncio
    async def test_unique_conflict_is_retried(self):
        """A lost first-insert race should be retried and succeed."""
        # Arrange
        vote_repo = RacingVoteRepository(conflicts=1)
        ledger, videos = _ledger(vote_repo)
        video = await videos.save(make_video())
        target = TargetRef(target_type=TargetType.VIDEO, target_id=video.id)

        # Act
        result = await ledger.cast_vote(UserId(uuid4()), target, VoteKind.LIKE)

        # Assert
        assert result.outcome == VoteOutcome.RECORDED
        assert result.counters.likes_count == 1

    @pytest.mark.asyncio
    async def test_conflicts_beyond_attempts_raise_transient(self):
        """Persistent conflicts should give up with TransientError."""
        vote_repo = RacingVoteRepository(conflicts=3)
        ledger, videos = _ledger(vote_repo, max_attempts=3)
        video = await videos.save(make_video())
        target = TargetRef(target_type=TargetType.VIDEO, target_id=video.id)

        with pytest.raises(TransientError):
            await ledger.cast_vote(UserId(uuid4()), target, VoteKind.LIKE)

        assert (await ledger.get_counters(target)).likes_count == 0

    @pytest.mark.asyncio
    async def test_timeout_retried_once(self):
        """One timed-out attempt should be retried and succeed."""
        vote_repo = StallingVoteRepository(stalls=1)
        ledger, videos = _ledger(vote_repo, timeout=0.05)
        video = await videos.save(make_video())
        target = TargetRef(target_type=TargetType.VIDEO, target_id=video.id)

        result = await ledger.cast_vote(UserId(uuid4()), target, VoteKind.LIKE)

        assert result.counters.likes_count == 1

    @pytest.mark.asyncio
    async def test_second_timeout_raises_transient_and_leaves_no_trace(self):
        """Two timeouts should raise TransientError with nothing written."""
        vote_repo = StallingVoteRepository(stalls=2)
        ledger, videos = _ledger(vote_repo, timeout=0.05)
        video = await videos.save(make_video())
        target = TargetRef(target_type=TargetType.VIDEO, target_id=video.id)

        with pytest.raises(TransientError):
            await ledger.cast_vote(UserId(uuid4()), target, VoteKind.LIKE)

        assert await ledger.get_counters(target) == EngagementCounters()
        assert await _votes_on(vote_repo, target) == (0, 0)


class TestLikeStatus:
    """Tests for get_like_status."""

    @pytest.mark.asyncio
    async def test_status_follows_votes(self, unit_env):
        """Status should reflect the user's current vote."""
        ledger = await unit_env.get(EngagementLedger)
        target = await _seed_video(unit_env)
        user_id = UserId(uuid4())

        before = await ledger.get_like_status(user_id, target)
        await ledger.cast_vote(user_id, target, VoteKind.DISLIKE)
        after = await ledger.get_like_status(user_id, target)

        assert (before.liked, before.disliked) == (False, False)
        assert (after.liked, after.disliked) == (False, True)


class TestReconcile:
    """Tests for reconcile."""

    @pytest.mark.asyncio
    async def test_reconcile_repairs_drift(self, unit_env):
        """Drifted counters should be reset to the vote counts."""
        # Arrange
        ledger = await unit_env.get(EngagementLedger)
        counter_repo = await unit_env.get(EngagementCounterRepository)
        target = await _seed_video(unit_env)
        await ledger.cast_vote(UserId(uuid4()), target, VoteKind.LIKE)
        await counter_repo.set_counters(
            target, EngagementCounters(likes_count=7, dislikes_count=3)
        )

        # Act
        corrected = await ledger.reconcile(target)

        # Assert
        assert corrected == EngagementCounters(likes_count=1, dislikes_count=0)
        assert await ledger.get_counters(target) == corrected

    @pytest.mark.asyncio
    async def test_reconcile_missing_target(self, unit_env):
        """Reconciling an unknown target should raise NotFoundError."""
        ledger = await unit_env.get(EngagementLedger)

        with pytest.raises(NotFoundError):
            await ledger.reconcile(
                TargetRef(target_type=TargetType.COMMENT, target_id=uuid4())
            )

    @pytest.mark.asyncio
    async def test_reconcile_locks_target_before_counting(self):
        """The target row lock must be taken before votes are counted."""
        # Arrange
        calls: list[str] = []

        class CountingVoteRepository(InMemoryVoteRepository):
            async def count_by_target(self, *args, **kwargs):
                calls.append("count")
                return await super().count_by_target(*args, **kwargs)

        class LockingCounterRepository(InMemoryEngagementCounterRepository):
            async def get_counters(self, target, for_update=False):
                calls.append("lock" if for_update else "read")
                return await super().get_counters(target, for_update=for_update)

        votes = CountingVoteRepository()
        videos = InMemoryVideoRepository()
        comments = InMemoryCommentRepository()
        ledger = EngagementLedger(
            vote_repository=votes,
            counter_repository=LockingCounterRepository(videos, comments),
            transaction_manager=InMemoryTransactionManager(votes, videos, comments),
            video_repository=videos,
            comment_repository=comments,
            engagement_settings=EngagementSettings(),
        )
        video = await videos.save(make_video())

        # Act
        await ledger.reconcile(TargetRef(target_type=TargetType.VIDEO, target_id=video.id))

        # Assert
        assert calls[:3] == ["lock", "count", "count"]
