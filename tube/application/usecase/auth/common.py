"""Shared response models for authentication use cases."""

from tube.application.usecase.base import CamelModel
from tube.domain.model import User
from tube.domain.service import AuthSession
from tube.domain.value import Role


class UserInfo(CamelModel):
    """Public view of an account."""

    id: str
    username: str
    email: str
    role: Role

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            id=str(user.id),
            username=user.username.root,
            email=user.email.root,
            role=user.role,
        )


class AuthResponse(CamelModel):
    """Signup/login response.

    Routes move ``refresh_token`` into an HTTP-only cookie and leave it out
    of the body.
    """

    user: UserInfo
    access_token: str
    refresh_token: str

    @classmethod
    def from_session(cls, session: AuthSession) -> "AuthResponse":
        return cls(
            user=UserInfo.from_user(session.user),
            access_token=session.access_token,
            refresh_token=session.refresh_token,
        )
