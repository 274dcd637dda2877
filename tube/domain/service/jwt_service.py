"""JWT token domain service."""

import logfire

from tube.config import AuthSettings
from tube.domain.model.user import User
from tube.domain.value import TokenKind
from tube.util.jwt import JWTError, TokenClaims, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for issuing and verifying access and refresh tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def issue_access(self, user: User) -> str:
        """Create a short-lived access token for a user.

        Args:
            user: Authenticated user

        Returns:
            JWT token string carrying id, email and role
        """
        with logfire.span("jwt_service.issue_access", user_id=str(user.id)):
            return create_token(
                TokenKind.ACCESS,
                user.id,
                user.email.root,
                self.auth_settings,
                role=user.role,
            )

    def issue_refresh(self, user: User) -> str:
        """Create a long-lived refresh token for a user.

        Args:
            user: Authenticated user

        Returns:
            JWT token string carrying id and email
        """
        with logfire.span("jwt_service.issue_refresh", user_id=str(user.id)):
            return create_token(
                TokenKind.REFRESH, user.id, user.email.root, self.auth_settings
            )

    def verify(self, token: str, kind: TokenKind) -> TokenClaims:
        """Verify a token of the given kind and extract its claims.

        Args:
            token: JWT token string
            kind: Kind the token must be

        Returns:
            Token claims

        Raises:
            JWTError: If token is invalid, expired or of the wrong kind
        """
        with logfire.span("jwt_service.verify", kind=kind.value):
            try:
                return verify_token(token, kind, self.auth_settings)
            except JWTError as e:
                # The cause stays in our logs only
                logfire.info(
                    "JWT verification failed",
                    kind=kind.value,
                    reason=type(e.__cause__).__name__ if e.__cause__ else "claims",
                )
                raise
