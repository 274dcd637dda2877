"""PostgreSQL implementation of the transaction manager."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from tube.domain.repository import TransactionManager


class PostgresTransactionManager(TransactionManager):
    """Atomic units as SAVEPOINTs inside the request transaction.

    Rolling back a savepoint undoes only the unit, so the ledger can retry
    after a unique violation without losing the rest of the request.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize with the request's database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        """Run the block inside ``SAVEPOINT ... RELEASE`` or roll it back."""
        async with self.session.begin_nested():
            yield
