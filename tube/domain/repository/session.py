"""Session store interface."""

from abc import ABC, abstractmethod
from typing import Optional

from tube.domain.value import UserId


class SessionStore(ABC):
    """Key-value store holding the single live refresh token per user.

    The stored value, not the token's signature, decides whether a refresh
    token is still usable. ``put`` always overwrites (last writer wins),
    which is what makes a new login end the previous session.
    """

    @abstractmethod
    async def put(self, user_id: UserId, token: str, ttl_seconds: int) -> None:
        """Store a user's refresh token, replacing any previous one.

        Args:
            user_id: Owner of the session
            token: Encoded refresh token
            ttl_seconds: Lifetime of the entry

        Raises:
            TransientError: If the store is unreachable
        """
        pass

    @abstractmethod
    async def get(self, user_id: UserId) -> Optional[str]:
        """Get a user's current refresh token.

        Args:
            user_id: Owner of the session

        Returns:
            The stored token, or None if there is no live session

        Raises:
            TransientError: If the store is unreachable
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> None:
        """Remove a user's session. Missing entries are ignored.

        Args:
            user_id: Owner of the session

        Raises:
            TransientError: If the store is unreachable
        """
        pass
