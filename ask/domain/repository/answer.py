"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ask.domain.model.answer import Answer
from ask.domain.value import AnswerId, QuestionId


class AnswerRepository(ABC):
    """Repository for Answer entity.

    Defines the contract for answer persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find all answers to a question.

        Args:
            question_id: The question ID

        Returns:
            Answers ordered accepted first, then by votes, then oldest first
        """
        pass

    @abstractmethod
    async def find_accepted(self, question_id: QuestionId) -> Optional[Answer]:
        """Find the accepted answer of a question.

        Args:
            question_id: The question ID

        Returns:
            The accepted answer, or None if no answer is accepted
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create).

        Args:
            answer: The answer to save

        Returns:
            The saved answer
        """
        pass

    @abstractmethod
    async def adjust_votes(self, answer_id: AnswerId, delta: int) -> None:
        """Atomically add delta to the cached vote counter.

        Args:
            answer_id: The answer ID
            delta: Signed change to apply
        """
        pass

    @abstractmethod
    async def set_accepted(self, question_id: QuestionId, answer_id: AnswerId) -> None:
        """Mark one answer accepted and clear every other answer of the question.

        Runs inside the caller's transaction, which must hold the
        question's row lock, so no reader observes two accepted answers
        or none while one is being replaced.

        Args:
            question_id: The question whose acceptance changes
            answer_id: The answer to accept (must belong to question_id)
        """
        pass
