"""Engagement ledger domain service."""

import asyncio
from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from tube.config import EngagementSettings
from tube.domain.error import NotFoundError, TransientError
from tube.domain.model import EngagementCounters, Vote, VoteUpdate
from tube.domain.repository import (
    CommentRepository,
    EngagementCounterRepository,
    TransactionManager,
    VideoRepository,
    VoteRepository,
)
from tube.domain.value import (
    CommentId,
    TargetRef,
    TargetType,
    UserId,
    VideoId,
    VoteId,
    VoteKind,
    VoteOutcome,
)

from .base import Service


@dataclass(frozen=True)
class CastVoteResult:
    """Result of casting a vote.

    ``vote`` is the user's vote after the cast, None once retracted.
    ``counters`` are read after the vote step committed.
    """

    outcome: VoteOutcome
    target: TargetRef
    vote: Vote | None
    counters: EngagementCounters


@dataclass(frozen=True)
class LikeStatus:
    """A user's current stance on one target."""

    liked: bool
    disliked: bool


class EngagementLedger(Service):
    """Owns per-user like/dislike state and the counters on each target.

    Per (user, target) the vote moves through NoVote, Liked and Disliked.
    Casting the same kind twice returns to NoVote. Casting the opposite
    kind switches in place. The vote write and its counter deltas always
    commit together or not at all.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        counter_repository: EngagementCounterRepository,
        transaction_manager: TransactionManager,
        video_repository: VideoRepository,
        comment_repository: CommentRepository,
        engagement_settings: EngagementSettings,
    ) -> None:
        """Initialize engagement ledger.

        Args:
            vote_repository: Vote records
            counter_repository: Counters stored on videos and comments
            transaction_manager: Atomic unit around vote + counter writes
            video_repository: Video existence checks
            comment_repository: Comment existence checks
            engagement_settings: Retry and timeout bounds
        """
        self.vote_repository = vote_repository
        self.counter_repository = counter_repository
        self.transaction_manager = transaction_manager
        self.video_repository = video_repository
        self.comment_repository = comment_repository
        self.max_attempts = engagement_settings.max_attempts
        self.timeout = engagement_settings.timeout_seconds

    async def cast_vote(
        self, user_id: UserId, target: TargetRef, kind: VoteKind
    ) -> CastVoteResult:
        """Cast a like or dislike.

        A unique-constraint conflict means another request inserted the
        user's first vote concurrently. The step is then re-run against
        the now visible vote, up to ``max_attempts`` times. A timed-out
        step is retried once.

        Args:
            user_id: Voting user
            target: Video or comment being voted on
            kind: Like or dislike

        Returns:
            Transition taken and the target's counters afterwards

        Raises:
            NotFoundError: If the target does not exist
            TransientError: If the step could not commit within the bounds
        """
        with logfire.span(
            "engagement.cast_vote",
            user_id=str(user_id),
            target=str(target),
            kind=kind.value,
        ):
            await self._ensure_target_exists(target)

            timeouts = 0
            for attempt in range(1, self.max_attempts + 1):
                try:
                    outcome, vote = await asyncio.wait_for(
                        self._apply_vote(user_id, target, kind), timeout=self.timeout
                    )
                except IntegrityError:
                    logfire.warn(
                        "Concurrent vote conflict, retrying",
                        user_id=str(user_id),
                        target=str(target),
                        attempt=attempt,
                    )
                    continue
                except TimeoutError:
                    timeouts += 1
                    logfire.warn(
                        "Vote step timed out",
                        user_id=str(user_id),
                        target=str(target),
                        attempt=attempt,
                    )
                    if timeouts > 1:
                        break
                    continue

                counters = await self.counter_repository.get_counters(target)
                logfire.info(
                    "Vote cast",
                    user_id=str(user_id),
                    target=str(target),
                    kind=kind.value,
                    outcome=outcome.value,
                )
                return CastVoteResult(
                    outcome=outcome,
                    target=target,
                    vote=vote,
                    counters=counters or EngagementCounters(),
                )

            logfire.error(
                "Vote could not be committed",
                user_id=str(user_id),
                target=str(target),
            )
            raise TransientError("cast vote")

    async def get_like_status(self, user_id: UserId, target: TargetRef) -> LikeStatus:
        """Get a user's current stance on a target.

        Args:
            user_id: User
            target: Video or comment

        Returns:
            Whether the user currently likes or dislikes the target
        """
        vote = await self.vote_repository.find_by_user_and_target(
            user_id, target.target_type, target.target_id
        )
        return LikeStatus(
            liked=vote is not None and vote.kind is VoteKind.LIKE,
            disliked=vote is not None and vote.kind is VoteKind.DISLIKE,
        )

    async def get_counters(
        self, target: TargetRef, for_update: bool = False
    ) -> EngagementCounters:
        """Read a target's counters.

        With ``for_update`` the target row stays locked until the enclosing
        transaction ends.

        Raises:
            NotFoundError: If the target does not exist
        """
        counters = await self.counter_repository.get_counters(
            target, for_update=for_update
        )
        if counters is None:
            raise NotFoundError(target.target_type.value.capitalize(), str(target.target_id))
        return counters

    async def reconcile(self, target: TargetRef) -> EngagementCounters:
        """Recompute a target's counters from its vote records.

        Repairs drift left behind by incidents or manual data fixes.

        Args:
            target: Video or comment

        Returns:
            The corrected counters

        Raises:
            NotFoundError: If the target does not exist
        """
        with logfire.span("engagement.reconcile", target=str(target)):
            await self._ensure_target_exists(target)

            async with self.transaction_manager.atomic():
                # Wait out in-flight votes so the counts below include them
                current = await self.get_counters(target, for_update=True)
                likes = await self.vote_repository.count_by_target(
                    target.target_type, target.target_id, VoteKind.LIKE
                )
                dislikes = await self.vote_repository.count_by_target(
                    target.target_type, target.target_id, VoteKind.DISLIKE
                )
                corrected = EngagementCounters(
                    likes_count=likes, dislikes_count=dislikes
                )
                if corrected != current:
                    logfire.warn(
                        "Engagement counter drift",
                        target=str(target),
                        stored_likes=current.likes_count,
                        stored_dislikes=current.dislikes_count,
                        likes=likes,
                        dislikes=dislikes,
                    )
                    await self.counter_repository.set_counters(target, corrected)

            return corrected

    async def _apply_vote(
        self, user_id: UserId, target: TargetRef, kind: VoteKind
    ) -> tuple[VoteOutcome, Vote | None]:
        async with self.transaction_manager.atomic():
            existing = await self.vote_repository.find_by_user_and_target(
                user_id, target.target_type, target.target_id, for_update=True
            )

            if existing is None:
                now = datetime.now()
                vote = Vote(
                    id=VoteId(uuid4()),
                    user_id=user_id,
                    target_type=target.target_type,
                    target_id=target.target_id,
                    kind=kind,
                    created_at=now,
                    updated_at=now,
                )
                # Raises IntegrityError if a concurrent first vote won
                saved = await self.vote_repository.save(vote)
                await self.counter_repository.apply_delta(target, kind.counter_field, 1)
                return VoteOutcome.RECORDED, saved

            if existing.kind is kind:
                await self.vote_repository.delete(existing.id)
                await self.counter_repository.apply_delta(
                    target, kind.counter_field, -1, floor=0
                )
                return VoteOutcome.RETRACTED, None

            updated = await self.vote_repository.update(
                existing.id, VoteUpdate(kind=kind)
            )
            await self.counter_repository.apply_delta(target, kind.counter_field, 1)
            await self.counter_repository.apply_delta(
                target, existing.kind.counter_field, -1, floor=0
            )
            return VoteOutcome.SWITCHED, updated

    async def _ensure_target_exists(self, target: TargetRef) -> None:
        if target.target_type is TargetType.VIDEO:
            found = await self.video_repository.find_by_id(VideoId(target.target_id))
            resource = "Video"
        else:
            found = await self.comment_repository.find_by_id(
                CommentId(target.target_id)
            )
            resource = "Comment"

        if not found:
            logfire.warn("Vote on non-existent target", target=str(target))
            raise NotFoundError(resource, str(target.target_id))
