"""In-memory vote repository for testing."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from tube.domain.model.vote import Vote, VoteUpdate
from tube.domain.repository.vote import VoteRepository
from tube.domain.value import TargetType, UserId, VoteId, VoteKind


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Mirrors the ``uq_votes_user_target`` unique constraint.
    """

    def __init__(self) -> None:
        self._votes: dict[VoteId, Vote] = {}

    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: TargetType,
        target_id: UUID,
        for_update: bool = False,
    ) -> Optional[Vote]:
        """Find a vote by user and target.

        ``for_update`` is a no-op; the transaction manager serializes
        atomic units instead.
        """
        for vote in self._votes.values():
            if (
                vote.user_id == user_id
                and vote.target_type == target_type
                and vote.target_id == target_id
            ):
                return vote
        return None

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        Raises:
            IntegrityError: If the user already voted on this target
        """
        existing = await self.find_by_user_and_target(
            vote.user_id, vote.target_type, vote.target_id
        )
        if existing:
            raise IntegrityError("Duplicate vote", None, Exception())

        self._votes[vote.id] = vote
        return vote

    async def update(self, vote_id: VoteId, changes: VoteUpdate) -> Optional[Vote]:
        """Apply a VoteUpdate."""
        vote = self._votes.get(vote_id)
        if not vote:
            return None
        updated = vote.model_copy(
            update={"kind": changes.kind, "updated_at": datetime.now()}
        )
        self._votes[vote_id] = updated
        return updated

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote by ID."""
        return self._votes.pop(vote_id, None) is not None

    async def count_by_target(
        self, target_type: TargetType, target_id: UUID, kind: VoteKind
    ) -> int:
        """Count votes of one kind on a target."""
        return sum(
            1
            for v in self._votes.values()
            if v.target_type == target_type
            and v.target_id == target_id
            and v.kind == kind
        )

    def snapshot(self) -> dict[VoteId, Vote]:
        """Copy of the current state (models are immutable)."""
        return dict(self._votes)

    def restore(self, state: dict[VoteId, Vote]) -> None:
        """Reset to a snapshot."""
        self._votes = dict(state)
