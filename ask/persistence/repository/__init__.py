"""PostgreSQL repository implementations."""

from ask.persistence.repository.answer import PostgresAnswerRepository
from ask.persistence.repository.question import PostgresQuestionRepository
from ask.persistence.repository.transaction import SessionTransactionManager
from ask.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresQuestionRepository",
    "PostgresAnswerRepository",
    "PostgresVoteRepository",
    "SessionTransactionManager",
]
