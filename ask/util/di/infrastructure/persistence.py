"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from ask.config import Settings, VotingSettings
from ask.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    TransactionManager,
    VoteRepository,
)
from ask.persistence.database import create_engine, create_session_factory
from ask.persistence.repository import (
    PostgresAnswerRepository,
    PostgresQuestionRepository,
    PostgresVoteRepository,
    SessionTransactionManager,
)
from ask.util.di.base import ProviderBase
from ask.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Services commit through the TransactionManager. Closing the session
        rolls back whatever is left open, such as the implicit transaction
        of a read-only request.
        """
        async with session_factory() as session:
            yield session

    @provide(scope=Scope.REQUEST)
    def get_transaction_manager(self, session: AsyncSession) -> TransactionManager:
        """Provide the request's transaction boundary."""
        return SessionTransactionManager(session)

    @provide(scope=Scope.REQUEST)
    def get_question_repository(self, session: AsyncSession) -> QuestionRepository:
        """Provide Question repository."""
        return PostgresQuestionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_answer_repository(self, session: AsyncSession) -> AnswerRepository:
        """Provide Answer repository."""
        return PostgresAnswerRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(
        self, session: AsyncSession, voting_settings: VotingSettings
    ) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(
            session, max_cast_attempts=voting_settings.max_cast_attempts
        )
