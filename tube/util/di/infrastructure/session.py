"""Session store infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from redis.asyncio import Redis

from tube.adapter.redis.session_store import RedisSessionStore
from tube.config import SessionStoreSettings
from tube.domain.repository import SessionStore
from tube.util.di.base import ProviderBase


class SessionProvider(ProviderBase):
    """Session store component base."""

    __mock_component__ = "session"


class ProdSessionProvider(SessionProvider):
    """Production session store provider using Redis."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_redis(
        self, session_settings: SessionStoreSettings
    ) -> AsyncIterator[Redis]:
        """Provide Redis client, closed when the container closes."""
        client = Redis.from_url(
            session_settings.url,
            decode_responses=True,
            socket_timeout=session_settings.timeout_seconds,
            socket_connect_timeout=session_settings.timeout_seconds,
        )
        logfire.info("Redis session store client created")
        yield client
        await client.aclose()

    @provide(scope=Scope.APP)
    def get_session_store(
        self, client: Redis, session_settings: SessionStoreSettings
    ) -> SessionStore:
        """Provide refresh-token session store."""
        return RedisSessionStore(client, key_prefix=session_settings.key_prefix)
