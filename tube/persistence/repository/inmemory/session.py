"""In-memory session store for testing."""

import time
from collections.abc import Callable
from typing import Optional

from tube.domain.repository.session import SessionStore
from tube.domain.value import UserId


class InMemorySessionStore(SessionStore):
    """In-memory implementation of SessionStore with TTL expiry.

    Args:
        clock: Monotonic time source in seconds, replaceable in tests
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[UserId, tuple[str, float]] = {}

    async def put(self, user_id: UserId, token: str, ttl_seconds: int) -> None:
        """Store a token, replacing any previous one."""
        self._entries[user_id] = (token, self._clock() + ttl_seconds)

    async def get(self, user_id: UserId) -> Optional[str]:
        """Get the stored token if it has not expired."""
        entry = self._entries.get(user_id)
        if entry is None:
            return None
        token, expires_at = entry
        if self._clock() >= expires_at:
            del self._entries[user_id]
            return None
        return token

    async def delete(self, user_id: UserId) -> None:
        """Remove the stored token."""
        self._entries.pop(user_id, None)
