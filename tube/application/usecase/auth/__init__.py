"""Authentication use cases."""

from .common import AuthResponse, UserInfo
from .get_current_user import GetCurrentUserResponse, GetCurrentUserUseCase
from .login import LoginRequest, LoginUseCase
from .logout import LogoutResponse, LogoutUseCase
from .refresh import RefreshRequest, RefreshResponse, RefreshUseCase
from .signup import SignupRequest, SignupUseCase

__all__ = [
    "AuthResponse",
    "UserInfo",
    "GetCurrentUserResponse",
    "GetCurrentUserUseCase",
    "LoginRequest",
    "LoginUseCase",
    "LogoutResponse",
    "LogoutUseCase",
    "RefreshRequest",
    "RefreshResponse",
    "RefreshUseCase",
    "SignupRequest",
    "SignupUseCase",
]
