"""In-memory answer repository for testing."""

import asyncio
from typing import List, Optional

from ask.domain.model.answer import Answer
from ask.domain.repository.answer import AnswerRepository
from ask.domain.value import AnswerId, QuestionId


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self) -> None:
        self._answers: dict[AnswerId, Answer] = {}

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        return self._answers.get(answer_id)

    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find all answers to a question."""
        answers = [a for a in self._answers.values() if a.question_id == question_id]
        answers.sort(key=lambda a: a.created_at)
        answers.sort(key=lambda a: (a.is_accepted, a.votes), reverse=True)
        return answers

    async def find_accepted(self, question_id: QuestionId) -> Optional[Answer]:
        """Find the accepted answer of a question."""
        for answer in self._answers.values():
            if answer.question_id == question_id and answer.is_accepted:
                return answer
        return None

    async def save(self, answer: Answer) -> Answer:
        """Save an answer."""
        self._answers[answer.id] = answer
        return answer

    async def adjust_votes(self, answer_id: AnswerId, delta: int) -> None:
        """Add delta to the cached vote counter."""
        answer = self._answers.get(answer_id)
        if answer:
            self._answers[answer_id] = answer.model_copy(
                update={"votes": answer.votes + delta}
            )

    async def set_accepted(self, question_id: QuestionId, answer_id: AnswerId) -> None:
        """Clear the current accepted answer, then accept answer_id."""
        # Callers read the accepted answer first; concurrent accepts only
        # stay consistent if the question lock serializes them
        await asyncio.sleep(0)
        for answer in list(self._answers.values()):
            if answer.question_id != question_id:
                continue
            accepted = answer.id == answer_id
            if answer.is_accepted != accepted:
                self._answers[answer.id] = answer.model_copy(
                    update={"is_accepted": accepted}
                )
