"""Request authentication domain service."""

import logfire

from tube.domain.error import ForbiddenError, UnauthenticatedError
from tube.domain.model import User
from tube.domain.repository import UserRepository
from tube.domain.value import Role, TokenKind
from tube.util.jwt import JWTError

from .base import Service
from .jwt_service import JWTService

BEARER_SCHEME = "bearer"


def extract_bearer(authorization: str | None) -> str | None:
    """Return the token of an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != BEARER_SCHEME or not token.strip():
        return None
    return token.strip()


class AuthGuard(Service):
    """Turns a request's access token into a loaded, active user.

    Access tokens are stateless: this guard never consults the session
    store, so an access token stays usable until it expires even after
    logout.
    """

    def __init__(self, jwt_service: JWTService, user_repository: UserRepository) -> None:
        """Initialize auth guard.

        Args:
            jwt_service: Token verification
            user_repository: Identity lookup
        """
        self.jwt_service = jwt_service
        self.user_repository = user_repository

    async def authenticate(
        self, authorization: str | None, cookie_token: str | None
    ) -> User:
        """Authenticate a request.

        The ``Authorization`` header wins over the access-token cookie
        when both are present.

        Args:
            authorization: Raw Authorization header value
            cookie_token: Access token cookie value

        Returns:
            The authenticated user

        Raises:
            UnauthenticatedError: If there is no token, the token does not
                verify, or the user is missing or deactivated
        """
        with logfire.span("auth_guard.authenticate"):
            token = extract_bearer(authorization) or cookie_token
            if not token:
                raise UnauthenticatedError()

            try:
                claims = self.jwt_service.verify(token, TokenKind.ACCESS)
            except JWTError:
                raise UnauthenticatedError()

            user = await self.user_repository.find_by_id(claims.user_id)
            if not user:
                logfire.warn("Token for unknown user", user_id=claims.sub)
                raise UnauthenticatedError()
            if not user.is_active:
                logfire.warn("Token for deactivated user", user_id=claims.sub)
                raise UnauthenticatedError()

            return user

    def require_role(self, user: User, *roles: Role) -> User:
        """Check that an authenticated user holds one of ``roles``.

        Raises:
            ForbiddenError: If the user's role is not allowed
        """
        if user.role not in roles:
            logfire.warn(
                "Role check failed", user_id=str(user.id), role=user.role.value
            )
            raise ForbiddenError()
        return user
