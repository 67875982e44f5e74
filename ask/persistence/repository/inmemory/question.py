"""In-memory question repository for testing."""

from typing import Optional

from ask.domain.model.question import Question
from ask.domain.repository.question import QuestionRepository
from ask.domain.value import QuestionId
from ask.persistence.repository.inmemory.locks import RowLocks


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}
        self._locks = RowLocks()

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    async def lock_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question and hold its row lock until the transaction ends."""
        async with self._locks.hold(question_id):
            return self._questions.get(question_id)

    async def save(self, question: Question) -> Question:
        """Save a question."""
        self._questions[question.id] = question
        return question

    async def adjust_votes(self, question_id: QuestionId, delta: int) -> None:
        """Add delta to the cached vote counter."""
        question = self._questions.get(question_id)
        if question:
            self._questions[question_id] = question.model_copy(
                update={"votes": question.votes + delta}
            )

    async def increment_view_count(self, question_id: QuestionId) -> Optional[int]:
        """Increment the view count by 1."""
        question = self._questions.get(question_id)
        if question is None:
            return None
        updated = question.model_copy(update={"view_count": question.view_count + 1})
        self._questions[question_id] = updated
        return updated.view_count
