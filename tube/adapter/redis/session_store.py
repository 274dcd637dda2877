"""Redis-backed session store."""

from typing import Optional

import logfire
from redis.asyncio import Redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

from tube.domain.error import TransientError
from tube.domain.repository.session import SessionStore
from tube.domain.value import UserId


class RedisSessionStore(SessionStore):
    """Refresh tokens stored as ``<prefix><user_id>`` string keys with a TTL.

    ``put`` is a plain ``SET ... EX``, so concurrent logins converge on the
    last writer.
    """

    def __init__(self, client: Redis, key_prefix: str = "refresh_token:") -> None:
        """Initialize store.

        Args:
            client: Redis client created with ``decode_responses=True``
            key_prefix: Prefix of session keys
        """
        self.client = client
        self.key_prefix = key_prefix

    def _key(self, user_id: UserId) -> str:
        return f"{self.key_prefix}{user_id}"

    async def put(self, user_id: UserId, token: str, ttl_seconds: int) -> None:
        """Store a user's refresh token with an expiry."""
        try:
            await self.client.set(self._key(user_id), token, ex=ttl_seconds)
        except (RedisConnectionError, RedisTimeoutError) as e:
            logfire.warn("Redis put failed", user_id=str(user_id), error=str(e))
            raise TransientError("session store put") from e

    async def get(self, user_id: UserId) -> Optional[str]:
        """Get a user's refresh token, if any."""
        try:
            value = await self.client.get(self._key(user_id))
        except (RedisConnectionError, RedisTimeoutError) as e:
            logfire.warn("Redis get failed", user_id=str(user_id), error=str(e))
            raise TransientError("session store get") from e
        if isinstance(value, bytes):
            return value.decode()
        return value

    async def delete(self, user_id: UserId) -> None:
        """Delete a user's refresh token."""
        try:
            await self.client.delete(self._key(user_id))
        except (RedisConnectionError, RedisTimeoutError) as e:
            logfire.warn("Redis delete failed", user_id=str(user_id), error=str(e))
            raise TransientError("session store delete") from e
