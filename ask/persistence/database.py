"""Async engine and session factory for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ask.config import DatabaseSettings, Settings


def _server_settings(database: DatabaseSettings) -> dict[str, str]:
    # Bound how long a cast or accept may wait on a contended row lock, so a
    # stuck transaction surfaces as StorageUnavailableError instead of a hang
    return {
        "application_name": "ask-api",
        "lock_timeout": str(database.lock_timeout_ms),
        "statement_timeout": str(database.statement_timeout_ms),
    }


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        connect_args={"server_settings": _server_settings(settings.database)},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory.

    Sessions never autoflush and keep loaded state after commit; every
    mutation goes through an explicit TransactionManager.transaction().
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
