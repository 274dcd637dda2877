"""Domain services."""

from .auth_guard import AuthGuard
from .auth_service import AuthService, AuthSession
from .base import Service
from .engagement_service import CastVoteResult, EngagementLedger, LikeStatus
from .jwt_service import JWTService
from .password_service import PasswordHasher
from .session_service import SessionService
from .user_service import UserService

__all__ = [
    "AuthGuard",
    "AuthService",
    "AuthSession",
    "CastVoteResult",
    "EngagementLedger",
    "JWTService",
    "LikeStatus",
    "PasswordHasher",
    "Service",
    "SessionService",
    "UserService",
]
