"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from tube.domain.model.vote import Vote, VoteUpdate
from tube.domain.value import TargetType, UserId, VoteId, VoteKind


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: TargetType,
        target_id: UUID,
        for_update: bool = False,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific target.

        Args:
            user_id: The user's ID
            target_type: Type of target (video or comment)
            target_id: ID of the target
            for_update: Lock the row until the enclosing transaction ends

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Insert a new vote.

        Args:
            vote: The vote to insert

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the user already has a vote on this target
        """
        pass

    @abstractmethod
    async def update(self, vote_id: VoteId, changes: VoteUpdate) -> Optional[Vote]:
        """Apply an update to an existing vote.

        Args:
            vote_id: The vote to update
            changes: The new values of the mutable fields

        Returns:
            The updated vote, or None if it no longer exists
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote.

        Args:
            vote_id: The vote ID to delete

        Returns:
            True if a vote was deleted, False if it did not exist
        """
        pass

    @abstractmethod
    async def count_by_target(
        self, target_type: TargetType, target_id: UUID, kind: VoteKind
    ) -> int:
        """Count votes of one kind on a target.

        Args:
            target_type: Type of target (video or comment)
            target_id: ID of the target
            kind: Which votes to count

        Returns:
            Number of matching votes
        """
        pass
