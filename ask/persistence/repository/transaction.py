"""SQLAlchemy session-backed transaction boundary."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import logfire
from sqlalchemy.exc import DBAPIError, InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from ask.domain.error import StorageUnavailableError
from ask.domain.repository import TransactionManager

# Contention and cancellation states; the same work can succeed on retry
RETRYABLE_SQLSTATES = frozenset(
    {
        "40001",  # serialization_failure
        "40P01",  # deadlock_detected
        "55P03",  # lock_not_available (lock_timeout)
        "57014",  # query_canceled (statement_timeout)
    }
)


def _sqlstate(error: DBAPIError) -> Optional[str]:
    # The asyncpg dialect wraps the driver error; the original is its cause
    orig = error.orig
    return getattr(orig, "sqlstate", None) or getattr(
        getattr(orig, "__cause__", None), "sqlstate", None
    )


def is_retryable(error: DBAPIError) -> bool:
    """Whether a database error means the store is temporarily unavailable."""
    return (
        isinstance(error, (OperationalError, InterfaceError))
        or error.connection_invalidated
        or _sqlstate(error) in RETRYABLE_SQLSTATES
    )


class SessionTransactionManager(TransactionManager):
    """Commits or rolls back the request's session around a unit of work."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize transaction manager.

        Args:
            session: SQLAlchemy async session shared with the repositories
        """
        self.session = session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """Commit on success, roll back on any error.

        Connection failures, lock and statement timeouts, deadlocks and
        serialization failures are reported as StorageUnavailableError.
        """
        try:
            yield
            await self.session.commit()
        except DBAPIError as e:
            await self.session.rollback()
            if is_retryable(e):
                logfire.error(
                    "Storage unavailable, transaction rolled back",
                    error=str(e),
                    error_type=type(e).__name__,
                    sqlstate=_sqlstate(e),
                )
                raise StorageUnavailableError("Storage temporarily unavailable") from e
            logfire.warn("Transaction rolled back", error=str(e))
            raise
        except Exception as e:
            await self.session.rollback()
            logfire.debug("Transaction rolled back", error=str(e))
            raise
