"""Signup use case."""

from pydantic import BaseModel, Field

from tube.application.usecase.base import parse_value
from tube.domain.service import AuthService
from tube.domain.value import Email, Username

from .common import AuthResponse


class SignupRequest(BaseModel):
    """Signup request."""

    username: str
    email: str
    password: str = Field(min_length=8)


class SignupUseCase:
    """Use case for registering a new account."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize signup use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: SignupRequest) -> AuthResponse:
        """Execute signup flow.

        Steps:
        1. Validate username and email
        2. Hash password and create the user
        3. Issue tokens and store the refresh token as the live session

        Args:
            request: Signup request

        Returns:
            New user and tokens

        Raises:
            ValidationError: If username, email or password are malformed
            ConflictError: If email or username is already registered
        """
        username = parse_value(Username, request.username, "username")
        email = parse_value(Email, request.email, "email")

        session = await self.auth_service.signup(username, email, request.password)
        return AuthResponse.from_session(session)
