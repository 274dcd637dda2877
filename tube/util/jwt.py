"""JWT token utilities."""

from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

import jwt
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from tube.config import AuthSettings
from tube.domain.value import Role, TokenKind, UserId


class TokenClaims(BaseModel):
    """Decoded JWT claims."""

    sub: str  # User ID
    email: str
    role: Role | None = None  # Only present on access tokens
    type: TokenKind
    jti: str
    iat: datetime
    exp: datetime

    @property
    def user_id(self) -> UserId:
        """Subject as a typed user ID."""
        return UserId(UUID(self.sub))


class JWTError(Exception):
    """JWT-related error.

    Raised with the same message for every kind of failure so callers
    cannot tell an expired token from a forged one.
    """

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


def _secret_for(kind: TokenKind, settings: AuthSettings) -> str:
    if kind is TokenKind.ACCESS:
        return settings.access_secret
    return settings.refresh_secret


def _lifetime_for(kind: TokenKind, settings: AuthSettings) -> timedelta:
    if kind is TokenKind.ACCESS:
        return timedelta(minutes=settings.access_token_ttl_minutes)
    return timedelta(days=settings.refresh_token_ttl_days)


def create_token(
    kind: TokenKind,
    user_id: UserId,
    email: str,
    settings: AuthSettings,
    role: Role | None = None,
) -> str:
    """Create a signed JWT.

    Every token gets a random ``jti`` so two tokens issued for the same
    user in the same second still differ.

    Args:
        kind: Access or refresh; selects secret and lifetime
        user_id: Subject of the token
        email: User email
        settings: Authentication settings
        role: User role (access tokens only)

    Returns:
        Encoded JWT token
    """
    now = datetime.now(timezone.utc)

    payload = {
        "sub": str(user_id),
        "email": email,
        "type": kind.value,
        "jti": uuid4().hex,
        "iat": now,
        "exp": now + _lifetime_for(kind, settings),
    }
    if kind is TokenKind.ACCESS:
        payload["role"] = (role or Role.USER).value

    return jwt.encode(
        payload, _secret_for(kind, settings), algorithm=settings.jwt_algorithm
    )


def verify_token(token: str, kind: TokenKind, settings: AuthSettings) -> TokenClaims:
    """Verify and decode a JWT token of the expected kind.

    Args:
        token: JWT token to verify
        kind: Kind the token must be
        settings: Authentication settings

    Returns:
        Token claims if valid

    Raises:
        JWTError: If token is expired, malformed, forged or of another kind
    """
    try:
        payload = jwt.decode(
            token,
            _secret_for(kind, settings),
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp", "iat", "jti", "type"]},
        )
        claims = TokenClaims(**payload)
    except (jwt.InvalidTokenError, PydanticValidationError, TypeError) as e:
        raise JWTError() from e

    if claims.type is not kind:
        raise JWTError()
    if kind is TokenKind.ACCESS and claims.role is None:
        raise JWTError()
    try:
        claims.user_id
    except ValueError as e:
        raise JWTError() from e

    return claims
