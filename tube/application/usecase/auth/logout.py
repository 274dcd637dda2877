"""Logout use case."""

from pydantic import BaseModel

from tube.domain.model import User
from tube.domain.service import AuthService


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


class LogoutUseCase:
    """Use case for ending the caller's session."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize logout use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(self, user: User) -> LogoutResponse:
        """Revoke the user's refresh token.

        The access token the caller holds stays valid until it expires.

        Args:
            user: Authenticated user

        Returns:
            Logout confirmation
        """
        await self.auth_service.logout(user)
        return LogoutResponse(success=True, message="Logout successful")
