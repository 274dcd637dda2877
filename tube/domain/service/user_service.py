"""User domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from tube.domain.error import ConflictError, NotFoundError
from tube.domain.model import User
from tube.domain.repository import UserRepository
from tube.domain.value import Email, Role, UserId, Username


class UserService:
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def find_by_id(self, user_id: UserId) -> User | None:
        """Get user by ID, or None."""
        return await self.user_repository.find_by_id(user_id)

    async def find_by_email(self, email: Email) -> User | None:
        """Get user by email, or None."""
        return await self.user_repository.find_by_email(email)

    async def register(
        self,
        username: Username,
        email: Email,
        password_hash: str,
        role: Role = Role.USER,
    ) -> User:
        """Create a new active account.

        Args:
            username: Desired username
            email: Account email
            password_hash: bcrypt digest of the password
            role: Account role

        Returns:
            Created user

        Raises:
            ConflictError: If the email or username is already registered
        """
        with logfire.span("user_service.register", username=username.root):
            if await self.user_repository.find_by_email(email):
                logfire.info("Signup with registered email", username=username.root)
                raise ConflictError("User with this email already exists")
            if await self.user_repository.find_by_username(username):
                logfire.info("Signup with taken username", username=username.root)
                raise ConflictError("User with this username already exists")

            now = datetime.now()
            user = User(
                id=UserId(uuid4()),
                username=username,
                email=email,
                password_hash=password_hash,
                role=role,
                is_active=True,
                created_at=now,
                updated_at=now,
            )
            try:
                saved = await self.user_repository.save(user)
            except IntegrityError:
                # Concurrent signup with the same email or username
                logfire.warn("Duplicate user insert", username=username.root)
                raise ConflictError("User with this email already exists")

            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def set_active(self, user_id: UserId, is_active: bool) -> User:
        """Activate or deactivate an account.

        Args:
            user_id: User ID
            is_active: New value of the active flag

        Returns:
            Updated user

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span(
            "user_service.set_active", user_id=str(user_id), is_active=is_active
        ):
            user = await self.user_repository.set_active(user_id, is_active)
            if not user:
                raise NotFoundError("User", str(user_id))
            logfire.info("User active flag changed", user_id=str(user_id), is_active=is_active)
            return user
