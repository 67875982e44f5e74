"""Question domain service."""

from uuid import uuid4

import logfire

from ask.domain.error import NotFoundError, UnauthenticatedError
from ask.domain.model.question import Question
from ask.domain.repository import QuestionRepository, TransactionManager
from ask.domain.value import QuestionId, UserId

from .base import Service


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        transaction_manager: TransactionManager,
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            transaction_manager: Transaction boundary
        """
        self.question_repository = question_repository
        self.transaction_manager = transaction_manager

    async def register_question(self, author_id: UserId | None) -> Question:
        """Register a new question with an empty tally and no views.

        Args:
            author_id: Author ID (None if the caller isn't authenticated)

        Returns:
            Saved question

        Raises:
            UnauthenticatedError: If no author is supplied
        """
        if author_id is None:
            raise UnauthenticatedError("ask a question")

        with logfire.span("question_service.register_question", author_id=str(author_id)):
            question = Question(id=QuestionId(uuid4()), author_id=author_id)
            async with self.transaction_manager.transaction():
                saved = await self.question_repository.save(question)
            logfire.info("Question registered", question_id=str(saved.id))
            return saved

    async def get_question(self, question_id: QuestionId) -> Question:
        """Get a question by ID.

        Args:
            question_id: Question ID

        Returns:
            The question

        Raises:
            NotFoundError: If the question doesn't exist
        """
        with logfire.span("question_service.get_question", question_id=str(question_id)):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            return question
