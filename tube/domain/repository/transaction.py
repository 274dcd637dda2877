"""Transaction boundary interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Groups repository writes into one all-or-nothing unit.

    Usage:
        async with transaction_manager.atomic():
            await vote_repository.save(vote)
            await counter_repository.apply_delta(...)

    If the block raises (including cancellation), none of its writes
    become visible. Units may be entered inside an outer request
    transaction; they then behave as a savepoint.
    """

    @abstractmethod
    def atomic(self) -> AbstractAsyncContextManager[None]:
        """Open an atomic unit of work."""
        pass
