"""Login use case."""

from pydantic import BaseModel

from tube.application.usecase.base import parse_value
from tube.domain.error import UnauthenticatedError, ValidationError
from tube.domain.service import AuthService
from tube.domain.service.auth_service import INVALID_CREDENTIALS
from tube.domain.value import Email

from .common import AuthResponse


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginUseCase:
    """Use case for password login."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Args:
            request: Login request

        Returns:
            User and tokens of the new session

        Raises:
            ValidationError: If email or password is missing
            UnauthenticatedError: If the credentials do not match
        """
        if not request.email or not request.password:
            raise ValidationError("Email and password are required")

        try:
            email = parse_value(Email, request.email, "email")
        except ValidationError:
            # A malformed email cannot belong to an account
            raise UnauthenticatedError(INVALID_CREDENTIALS)

        session = await self.auth_service.login(email, request.password)
        return AuthResponse.from_session(session)
