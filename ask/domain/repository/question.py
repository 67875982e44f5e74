"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from ask.domain.model.question import Question
from ask.domain.value import QuestionId


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Defines the contract for question persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def lock_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID and hold its row lock until the transaction ends.

        Serializes operations scoped to one question (answer acceptance).

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create).

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def adjust_votes(self, question_id: QuestionId, delta: int) -> None:
        """Atomically add delta to the cached vote counter.

        Uses SQL-level arithmetic to avoid race conditions.

        Args:
            question_id: The question ID
            delta: Signed change to apply
        """
        pass

    @abstractmethod
    async def increment_view_count(self, question_id: QuestionId) -> Optional[int]:
        """Atomically increment the view count by 1.

        Args:
            question_id: The question ID

        Returns:
            The new view count, or None if the question doesn't exist
        """
        pass
