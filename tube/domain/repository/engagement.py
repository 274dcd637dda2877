"""Engagement counter repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from tube.domain.model.vote import EngagementCounters
from tube.domain.value import CounterField, TargetRef


class EngagementCounterRepository(ABC):
    """Access to the like/dislike counters stored on videos and comments.

    Counters are only ever changed through relative deltas applied by the
    store itself, never by writing back a value the caller read earlier.
    """

    @abstractmethod
    async def apply_delta(
        self, target: TargetRef, field: CounterField, delta: int, floor: int = 0
    ) -> None:
        """Atomically add ``delta`` to a counter, clamped at ``floor``.

        Args:
            target: The video or comment holding the counter
            field: Which counter to change
            delta: Signed amount to add
            floor: Lowest value the counter may take
        """
        pass

    @abstractmethod
    async def get_counters(
        self, target: TargetRef, for_update: bool = False
    ) -> Optional[EngagementCounters]:
        """Read a target's counters.

        Args:
            target: The video or comment
            for_update: Lock the target row until the transaction ends

        Returns:
            Current counters, or None if the target does not exist
        """
        pass

    @abstractmethod
    async def set_counters(
        self, target: TargetRef, counters: EngagementCounters
    ) -> None:
        """Overwrite a target's counters.

        Only used to repair drift from recomputed vote counts.

        Args:
            target: The video or comment
            counters: Values to store
        """
        pass
