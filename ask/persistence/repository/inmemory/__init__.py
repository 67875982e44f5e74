"""In-memory repository implementations for testing."""

from ask.persistence.repository.inmemory.answer import InMemoryAnswerRepository
from ask.persistence.repository.inmemory.question import InMemoryQuestionRepository
from ask.persistence.repository.inmemory.transaction import (
    InMemoryTransactionManager,
)
from ask.persistence.repository.inmemory.vote import InMemoryVoteRepository

__all__ = [
    "InMemoryQuestionRepository",
    "InMemoryAnswerRepository",
    "InMemoryVoteRepository",
    "InMemoryTransactionManager",
]
