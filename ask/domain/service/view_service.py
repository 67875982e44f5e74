"""View counter domain service."""

import logfire

from ask.domain.error import NotFoundError
from ask.domain.repository import QuestionRepository, TransactionManager
from ask.domain.value import QuestionId

from .base import Service


class ViewCounterService(Service):
    """Domain service for counting question views.

    Views are a soft metric: a client retrying a request counts twice,
    but concurrent increments are never lost.
    """

    def __init__(
        self,
        question_repository: QuestionRepository,
        transaction_manager: TransactionManager,
    ) -> None:
        """Initialize view counter service.

        Args:
            question_repository: Question repository
            transaction_manager: Transaction boundary
        """
        self.question_repository = question_repository
        self.transaction_manager = transaction_manager

    async def record_view(self, question_id: QuestionId) -> int:
        """Record one view of a question.

        Args:
            question_id: Question ID

        Returns:
            The question's new view count

        Raises:
            NotFoundError: If the question doesn't exist
        """
        with logfire.span("view_service.record_view", question_id=str(question_id)):
            async with self.transaction_manager.transaction():
                view_count = await self.question_repository.increment_view_count(
                    question_id
                )
                if view_count is None:
                    logfire.warn("View of non-existent question", question_id=str(question_id))
                    raise NotFoundError("Question", str(question_id))

            logfire.debug(
                "Question view recorded",
                question_id=str(question_id),
                view_count=view_count,
            )
            return view_count
