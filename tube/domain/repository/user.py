"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from tube.domain.model.user import User
from tube.domain.value import Email, UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: The user's (normalized) email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username.

        Args:
            username: The user's username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            IntegrityError: If the email or username is taken by another user
        """
        pass

    @abstractmethod
    async def set_active(self, user_id: UserId, is_active: bool) -> Optional[User]:
        """Activate or deactivate a user account.

        Args:
            user_id: The user's unique identifier
            is_active: New value of the active flag

        Returns:
            The updated user, or None if no such user exists
        """
        pass
