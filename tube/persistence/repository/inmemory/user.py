"""In-memory user repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from tube.domain.model.user import User
from tube.domain.repository.user import UserRepository
from tube.domain.value import Email, UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user.

        Raises:
            IntegrityError: If another user has the same email or username
        """
        for other in self._users.values():
            if other.id != user.id and (
                other.email == user.email or other.username == user.username
            ):
                raise IntegrityError("Duplicate user", None, Exception())

        self._users[user.id] = user
        return user

    async def set_active(self, user_id: UserId, is_active: bool) -> Optional[User]:
        """Activate or deactivate a user."""
        user = self._users.get(user_id)
        if not user:
            return None
        updated_user = user.model_copy(
            update={"is_active": is_active, "updated_at": datetime.now()}
        )
        self._users[user_id] = updated_user
        return updated_user
