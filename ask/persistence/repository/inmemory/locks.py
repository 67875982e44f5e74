"""Row locks for the in-memory repositories.

Mirrors ``SELECT ... FOR UPDATE``: a lock taken inside an
InMemoryTransactionManager transaction is held until that transaction ends,
so concurrent callers on the same row queue behind it. Outside a
transaction a lock only covers the repository call that took it.
"""

import asyncio
from collections import defaultdict
from contextlib import asynccontextmanager
from contextvars import ContextVar
from typing import AsyncIterator, Hashable, Optional

_held: ContextVar[Optional[list[asyncio.Lock]]] = ContextVar(
    "inmemory_held_locks", default=None
)


class RowLocks:
    """One asyncio.Lock per row key, created on first use."""

    def __init__(self) -> None:
        self._locks: defaultdict[Hashable, asyncio.Lock] = defaultdict(asyncio.Lock)

    @asynccontextmanager
    async def hold(self, key: Hashable) -> AsyncIterator[None]:
        lock = self._locks[key]
        held = _held.get()

        if held is not None and lock in held:
            yield
            return

        await lock.acquire()
        if held is None:
            try:
                yield
            finally:
                lock.release()
        else:
            held.append(lock)
            yield


@asynccontextmanager
async def transaction_scope() -> AsyncIterator[None]:
    """Release every row lock taken inside the block when it exits."""
    held: list[asyncio.Lock] = []
    token = _held.set(held)
    try:
        yield
    finally:
        _held.reset(token)
        for lock in reversed(held):
            lock.release()
