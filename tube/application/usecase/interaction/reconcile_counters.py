"""Reconcile counters use case."""

from pydantic import BaseModel

from tube.application.usecase.base import BaseUseCase, CamelModel
from tube.domain.service import EngagementLedger
from tube.domain.value import TargetType

from .common import parse_target


class ReconcileCountersRequest(BaseModel):
    """Reconcile counters request."""

    target_type: str
    target_id: str


class ReconcileCountersResponse(CamelModel):
    """Counters recomputed from vote records."""

    target_id: str
    target_type: TargetType
    likes_count: int
    dislikes_count: int


class ReconcileCountersUseCase(BaseUseCase):
    """Use case for recomputing a target's counters from its votes."""

    def __init__(self, engagement_ledger: EngagementLedger) -> None:
        """Initialize reconcile counters use case.

        Args:
            engagement_ledger: Engagement domain service
        """
        self.engagement_ledger = engagement_ledger

    async def execute(
        self, request: ReconcileCountersRequest
    ) -> ReconcileCountersResponse:
        """Recompute and store the counters.

        Args:
            request: Reconcile request

        Returns:
            Corrected counters

        Raises:
            ValidationError: If the target type or id is malformed
            NotFoundError: If the target does not exist
        """
        target = parse_target(request.target_type, request.target_id)
        counters = await self.engagement_ledger.reconcile(target)
        return ReconcileCountersResponse(
            target_id=str(target.target_id),
            target_type=target.target_type,
            likes_count=counters.likes_count,
            dislikes_count=counters.dislikes_count,
        )
