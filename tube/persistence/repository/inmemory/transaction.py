"""In-memory transaction manager for testing."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Protocol

from tube.domain.repository.transaction import TransactionManager


class Snapshottable(Protocol):
    """In-memory repository whose state can be copied and restored."""

    def snapshot(self) -> Any: ...

    def restore(self, state: Any) -> None: ...


class InMemoryTransactionManager(TransactionManager):
    """Serializes atomic units and rolls back their writes on failure.

    A single lock stands in for row locks. Any exception, including task
    cancellation, restores every registered repository to its state at
    the start of the unit.
    """

    def __init__(self, *repositories: Snapshottable) -> None:
        self._repositories = repositories
        self._lock = asyncio.Lock()

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        """Run the block under the lock, restoring state if it raises."""
        async with self._lock:
            snapshots = [repo.snapshot() for repo in self._repositories]
            try:
                yield
            except BaseException:
                for repo, state in zip(self._repositories, snapshots):
                    repo.restore(state)
                raise
