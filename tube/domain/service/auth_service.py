"""Credential and session lifecycle domain service."""

from dataclasses import dataclass

import logfire

from tube.domain.error import UnauthenticatedError, ValidationError
from tube.domain.model import User
from tube.domain.value import Email, TokenKind, Username
from tube.util.jwt import JWTError
from tube.util.password import MAX_PASSWORD_BYTES

from .base import Service
from .jwt_service import JWTService
from .password_service import PasswordHasher
from .session_service import SessionService
from .user_service import UserService

INVALID_CREDENTIALS = "Invalid email or password"
INVALID_REFRESH_TOKEN = "Invalid refresh token"


@dataclass(frozen=True)
class AuthSession:
    """Tokens handed to a client after signup, login or refresh."""

    user: User
    access_token: str
    refresh_token: str


class AuthService(Service):
    """Domain service for signup, login, refresh and logout.

    Session policy: one live refresh token per user. Signup and login
    replace whatever session existed. Refresh rotates the stored token, so
    a refresh token works at most once.
    """

    def __init__(
        self,
        user_service: UserService,
        password_hasher: PasswordHasher,
        jwt_service: JWTService,
        session_service: SessionService,
    ) -> None:
        """Initialize auth service.

        Args:
            user_service: User domain service
            password_hasher: Password hashing
            jwt_service: Token issuing and verification
            session_service: Refresh-token session tracking
        """
        self.user_service = user_service
        self.password_hasher = password_hasher
        self.jwt_service = jwt_service
        self.session_service = session_service

    async def signup(self, username: Username, email: Email, password: str) -> AuthSession:
        """Register a new account and open its first session.

        Args:
            username: Desired username
            email: Account email
            password: Plaintext password

        Returns:
            New user with access and refresh tokens

        Raises:
            ValidationError: If the password is too long for bcrypt
            ConflictError: If the email or username is taken
        """
        with logfire.span("auth_service.signup", username=username.root):
            if len(password.encode()) > MAX_PASSWORD_BYTES:
                raise ValidationError(
                    f"Password must be at most {MAX_PASSWORD_BYTES} bytes"
                )

            password_hash = await self.password_hasher.hash(password)
            user = await self.user_service.register(username, email, password_hash)
            return await self._open_session(user)

    async def login(self, email: Email, password: str) -> AuthSession:
        """Check credentials and open a new session.

        Any earlier session of the same user stops working.

        Args:
            email: Account email
            password: Plaintext password

        Returns:
            User with access and refresh tokens

        Raises:
            UnauthenticatedError: If the credentials are wrong or the
                account is deactivated
        """
        with logfire.span("auth_service.login"):
            user = await self.user_service.find_by_email(email)
            if not user or not user.is_active:
                await self.password_hasher.verify_dummy(password)
                logfire.info("Login for unknown or inactive account")
                raise UnauthenticatedError(INVALID_CREDENTIALS)

            if not await self.password_hasher.verify(password, user.password_hash):
                logfire.info("Login with wrong password", user_id=str(user.id))
                raise UnauthenticatedError(INVALID_CREDENTIALS)

            session = await self._open_session(user)
            logfire.info("User logged in", user_id=str(user.id))
            return session

    async def refresh(self, refresh_token: str | None) -> AuthSession:
        """Exchange a refresh token for a new access token.

        The refresh token must verify and be byte-equal to the stored
        one. On success the stored token is rotated.

        Args:
            refresh_token: Refresh token from the client cookie

        Returns:
            User with a new access token and the rotated refresh token

        Raises:
            UnauthenticatedError: If the token is missing, does not verify,
                is not the current session token, or the user is gone
        """
        with logfire.span("auth_service.refresh"):
            if not refresh_token:
                raise UnauthenticatedError("Refresh token not provided")

            try:
                claims = self.jwt_service.verify(refresh_token, TokenKind.REFRESH)
            except JWTError:
                raise UnauthenticatedError(INVALID_REFRESH_TOKEN)

            if not await self.session_service.matches(claims.user_id, refresh_token):
                logfire.warn("Stale refresh token presented", user_id=claims.sub)
                raise UnauthenticatedError(INVALID_REFRESH_TOKEN)

            user = await self.user_service.find_by_id(claims.user_id)
            if not user or not user.is_active:
                logfire.warn("Refresh for unknown or inactive user", user_id=claims.sub)
                raise UnauthenticatedError(INVALID_REFRESH_TOKEN)

            session = await self._open_session(user)
            logfire.info("Session refreshed", user_id=str(user.id))
            return session

    async def logout(self, user: User) -> None:
        """End the user's session.

        Args:
            user: Authenticated user
        """
        with logfire.span("auth_service.logout", user_id=str(user.id)):
            await self.session_service.end(user.id)
            logfire.info("User logged out", user_id=str(user.id))

    async def _open_session(self, user: User) -> AuthSession:
        access_token = self.jwt_service.issue_access(user)
        refresh_token = self.jwt_service.issue_refresh(user)
        await self.session_service.start(user.id, refresh_token)
        return AuthSession(
            user=user, access_token=access_token, refresh_token=refresh_token
        )
