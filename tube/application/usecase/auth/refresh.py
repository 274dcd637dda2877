"""Refresh use case."""

from pydantic import BaseModel

from tube.application.usecase.base import CamelModel
from tube.domain.service import AuthService


class RefreshRequest(BaseModel):
    """Refresh request."""

    refresh_token: str | None  # From the refresh cookie


class RefreshResponse(CamelModel):
    """Refresh response.

    ``refresh_token`` is the rotated token; routes return it as a cookie.
    """

    access_token: str
    refresh_token: str


class RefreshUseCase:
    """Use case for exchanging a refresh token."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize refresh use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: RefreshRequest) -> RefreshResponse:
        """Execute refresh flow.

        Args:
            request: Refresh request

        Returns:
            New access token and rotated refresh token

        Raises:
            UnauthenticatedError: If the refresh token is missing, invalid
                or no longer the live session token
        """
        session = await self.auth_service.refresh(request.refresh_token)
        return RefreshResponse(
            access_token=session.access_token,
            refresh_token=session.refresh_token,
        )
