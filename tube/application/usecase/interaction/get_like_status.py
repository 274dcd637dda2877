"""Get like status use case."""

from pydantic import BaseModel

from tube.application.usecase.base import CamelModel
from tube.domain.model import User
from tube.domain.service import EngagementLedger

from .common import parse_target


class GetLikeStatusRequest(BaseModel):
    """Get like status request."""

    target_type: str
    target_id: str


class GetLikeStatusResponse(CamelModel):
    """Caller's stance on a target."""

    liked: bool
    disliked: bool


class GetLikeStatusUseCase:
    """Use case for reading whether the caller likes or dislikes a target."""

    def __init__(self, engagement_ledger: EngagementLedger) -> None:
        self.engagement_ledger = engagement_ledger

    async def execute(
        self, user: User, request: GetLikeStatusRequest
    ) -> GetLikeStatusResponse:
        target = parse_target(request.target_type, request.target_id)
        status = await self.engagement_ledger.get_like_status(user.id, target)
        return GetLikeStatusResponse(liked=status.liked, disliked=status.disliked)
