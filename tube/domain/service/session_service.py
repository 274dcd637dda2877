"""Refresh-token session domain service."""

import asyncio
import hmac
from collections.abc import Awaitable, Callable
from typing import TypeVar

import logfire

from tube.config import AuthSettings, SessionStoreSettings
from tube.domain.error import TransientError
from tube.domain.repository import SessionStore
from tube.domain.value import UserId

from .base import Service

T = TypeVar("T")

# One retry after the first failure
STORE_ATTEMPTS = 2


class SessionService(Service):
    """Tracks the single live refresh token of each user.

    Every store call is time-bounded. A timeout or transient store failure
    is retried once and then surfaced as ``TransientError``.
    """

    def __init__(
        self,
        session_store: SessionStore,
        session_settings: SessionStoreSettings,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize session service.

        Args:
            session_store: Key-value store for refresh tokens
            session_settings: Store timeout configuration
            auth_settings: Authentication settings (refresh TTL)
        """
        self.session_store = session_store
        self.timeout = session_settings.timeout_seconds
        self.ttl_seconds = auth_settings.refresh_token_ttl_seconds

    async def start(self, user_id: UserId, refresh_token: str) -> None:
        """Make ``refresh_token`` the user's only valid refresh token.

        Any previous session of the user ends here.

        Args:
            user_id: Session owner
            refresh_token: Newly issued refresh token
        """
        with logfire.span("session_service.start", user_id=str(user_id)):
            await self._call(
                "put",
                lambda: self.session_store.put(
                    user_id, refresh_token, self.ttl_seconds
                ),
            )

    async def matches(self, user_id: UserId, refresh_token: str) -> bool:
        """Check whether a presented refresh token is the stored one.

        Args:
            user_id: Subject of the presented token
            refresh_token: Token from the client

        Returns:
            True only if a session exists and the values are byte-equal
        """
        with logfire.span("session_service.matches", user_id=str(user_id)):
            stored = await self._call("get", lambda: self.session_store.get(user_id))
            if stored is None:
                logfire.info("No live session", user_id=str(user_id))
                return False
            return hmac.compare_digest(stored.encode(), refresh_token.encode())

    async def end(self, user_id: UserId) -> None:
        """Revoke the user's refresh token.

        Args:
            user_id: Session owner
        """
        with logfire.span("session_service.end", user_id=str(user_id)):
            await self._call("delete", lambda: self.session_store.delete(user_id))

    async def _call(self, operation: str, call: Callable[[], Awaitable[T]]) -> T:
        for attempt in range(1, STORE_ATTEMPTS + 1):
            try:
                return await asyncio.wait_for(call(), timeout=self.timeout)
            except (TimeoutError, TransientError) as e:
                logfire.warn(
                    "Session store call failed",
                    operation=operation,
                    attempt=attempt,
                    error=str(e) or type(e).__name__,
                )
        raise TransientError(f"session store {operation}")
