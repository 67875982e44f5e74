"""Answer domain service."""

from uuid import uuid4

import logfire

from ask.domain.error import NotFoundError, UnauthenticatedError
from ask.domain.model.answer import Answer
from ask.domain.model.event import AnswerSubmitted
from ask.domain.repository import AnswerRepository, QuestionRepository, TransactionManager
from ask.domain.value import AnswerId, QuestionId, UserId

from .base import Service
from .reaction_dispatcher import ReactionDispatcher


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        transaction_manager: TransactionManager,
        reaction_dispatcher: ReactionDispatcher,
    ) -> None:
        """Initialize answer service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
            transaction_manager: Transaction boundary
            reaction_dispatcher: Post-commit event dispatcher
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.transaction_manager = transaction_manager
        self.reaction_dispatcher = reaction_dispatcher

    async def submit_answer(
        self, author_id: UserId | None, question_id: QuestionId
    ) -> Answer:
        """Register an answer to a question.

        The question's author is notified after the answer commits, unless
        they answered their own question.

        Args:
            author_id: Answer author ID (None if the caller isn't authenticated)
            question_id: Question being answered

        Returns:
            Saved answer

        Raises:
            UnauthenticatedError: If no author is supplied
            NotFoundError: If the question doesn't exist
        """
        if author_id is None:
            raise UnauthenticatedError("answer a question")

        with logfire.span(
            "answer_service.submit_answer",
            author_id=str(author_id),
            question_id=str(question_id),
        ):
            async with self.transaction_manager.transaction():
                question = await self.question_repository.find_by_id(question_id)
                if not question:
                    logfire.warn(
                        "Answer to non-existent question", question_id=str(question_id)
                    )
                    raise NotFoundError("Question", str(question_id))

                answer = await self.answer_repository.save(
                    Answer(
                        id=AnswerId(uuid4()),
                        question_id=question_id,
                        author_id=author_id,
                    )
                )

            logfire.info(
                "Answer submitted",
                question_id=str(question_id),
                answer_id=str(answer.id),
            )

            if question.author_id != author_id:
                self.reaction_dispatcher.notify(
                    AnswerSubmitted(
                        question_owner_id=question.author_id,
                        question_id=question_id,
                        answer_id=answer.id,
                        author_id=author_id,
                    )
                )

            return answer
