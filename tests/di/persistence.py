"""Mock persistence providers for testing."""

from dishka import Scope, provide

from ask.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    TransactionManager,
    VoteRepository,
)
from ask.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryQuestionRepository,
    InMemoryTransactionManager,
    InMemoryVoteRepository,
)
from ask.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so state survives across the requests of
    one container (route tests), while each test builds its own container.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_question_repository(self) -> QuestionRepository:
        """Provide in-memory question repository."""
        return InMemoryQuestionRepository()

    @provide(scope=Scope.APP)
    def get_answer_repository(self) -> AnswerRepository:
        """Provide in-memory answer repository."""
        return InMemoryAnswerRepository()

    @provide(scope=Scope.APP)
    def get_vote_repository(self) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository()

    @provide(scope=Scope.APP)
    def get_transaction_manager(self) -> TransactionManager:
        """Provide in-memory transaction manager."""
        return InMemoryTransactionManager()
