"""Get current user use case."""

from datetime import datetime

from tube.application.usecase.base import CamelModel
from tube.domain.model import User
from tube.domain.value import Role


class UserProfile(CamelModel):
    """Account details visible to its owner."""

    id: str
    username: str
    email: str
    role: Role
    is_active: bool
    created_at: datetime


class GetCurrentUserResponse(CamelModel):
    """Get current user response."""

    user: UserProfile


class GetCurrentUserUseCase:
    """Use case for describing the authenticated user."""

    async def execute(self, user: User) -> GetCurrentUserResponse:
        """Build the profile of the user the auth guard resolved.

        Args:
            user: Authenticated user

        Returns:
            User information
        """
        return GetCurrentUserResponse(
            user=UserProfile(
                id=str(user.id),
                username=user.username.root,
                email=user.email.root,
                role=user.role,
                is_active=user.is_active,
                created_at=user.created_at,
            )
        )
