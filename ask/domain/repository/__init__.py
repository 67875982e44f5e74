"""Repository interfaces for Ask domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from ask.domain.repository.answer import AnswerRepository
from ask.domain.repository.question import QuestionRepository
from ask.domain.repository.transaction import TransactionManager
from ask.domain.repository.vote import VoteRepository

__all__ = [
    "QuestionRepository",
    "AnswerRepository",
    "VoteRepository",
    "TransactionManager",
]
