"""Cast vote use case."""

from pydantic import BaseModel

from tube.application.usecase.base import CamelModel
from tube.domain.model import User
from tube.domain.service import EngagementLedger
from tube.domain.value import TargetType, VoteKind, VoteOutcome

from .common import parse_target


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    target_type: TargetType
    target_id: str  # UUID string from the path
    kind: VoteKind


class CastVoteResponse(CamelModel):
    """Cast vote response with the target's counters after the vote."""

    message: VoteOutcome  # Recorded, Retracted or Switched
    outcome: VoteOutcome
    target_id: str
    target_type: TargetType
    likes_count: int
    dislikes_count: int


class CastVoteUseCase:
    """Use case for liking or disliking a video or comment."""

    def __init__(self, engagement_ledger: EngagementLedger) -> None:
        """Initialize cast vote use case.

        Args:
            engagement_ledger: Engagement domain service
        """
        self.engagement_ledger = engagement_ledger

    async def execute(self, user: User, request: CastVoteRequest) -> CastVoteResponse:
        """Execute vote toggle.

        Args:
            user: Authenticated voter
            request: Cast vote request

        Returns:
            Transition taken and fresh counters

        Raises:
            ValidationError: If the target id is malformed
            NotFoundError: If the target does not exist
            TransientError: If the vote could not be committed
        """
        target = parse_target(request.target_type, request.target_id)
        result = await self.engagement_ledger.cast_vote(user.id, target, request.kind)

        return CastVoteResponse(
            message=result.outcome,
            outcome=result.outcome,
            target_id=str(target.target_id),
            target_type=target.target_type,
            likes_count=result.counters.likes_count,
            dislikes_count=result.counters.dislikes_count,
        )
