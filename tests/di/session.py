"""Mock session store provider for testing."""

from dishka import Scope, provide

from tube.domain.repository import SessionStore
from tube.persistence.repository.inmemory import InMemorySessionStore
from tube.util.di.infrastructure.session import SessionProvider


class MockSessionProvider(SessionProvider):
    """Mock session provider using an in-memory store."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_session_store(self) -> SessionStore:
        """Provide in-memory session store."""
        return InMemorySessionStore()
