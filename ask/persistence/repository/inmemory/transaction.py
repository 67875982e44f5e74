"""In-memory transaction manager for testing."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from ask.domain.repository.transaction import TransactionManager
from ask.persistence.repository.inmemory.locks import transaction_scope


class InMemoryTransactionManager(TransactionManager):
    """Counts committed and rolled back scopes.

    Writes are applied immediately and are not undone on rollback. Row
    locks taken by the in-memory repositories are released when the scope
    ends either way.
    """

    def __init__(self) -> None:
        self.commits = 0
        self.rollbacks = 0

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        async with transaction_scope():
            try:
                yield
            except Exception:
                self.rollbacks += 1
                raise
            self.commits += 1
