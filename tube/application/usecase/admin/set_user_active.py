"""Set user active use case."""

from uuid import UUID

from pydantic import BaseModel

from tube.application.usecase.base import BaseUseCase, CamelModel, parse_value
from tube.domain.service import SessionService, UserService
from tube.domain.value import UserId


class SetUserActiveRequest(BaseModel):
    """Set user active request."""

    user_id: str
    is_active: bool


class SetUserActiveResponse(CamelModel):
    """Set user active response."""

    user_id: str
    is_active: bool


class SetUserActiveUseCase(BaseUseCase):
    """Use case for deactivating or reactivating an account."""

    def __init__(
        self, user_service: UserService, session_service: SessionService
    ) -> None:
        """Initialize set user active use case.

        Args:
            user_service: User domain service
            session_service: Refresh-token session tracking
        """
        self.user_service = user_service
        self.session_service = session_service

    async def execute(self, request: SetUserActiveRequest) -> SetUserActiveResponse:
        """Change the account's active flag.

        Deactivation also ends the user's session so the refresh token
        stops working immediately. Access tokens are rejected by the auth
        guard once the flag is off.

        Args:
            request: Set user active request

        Returns:
            The account's new state

        Raises:
            ValidationError: If the user id is malformed
            NotFoundError: If the user does not exist
        """
        user_id = UserId(parse_value(UUID, request.user_id, "user id"))
        user = await self.user_service.set_active(user_id, request.is_active)

        if not user.is_active:
            await self.session_service.end(user.id)

        return SetUserActiveResponse(user_id=str(user.id), is_active=user.is_active)
