"""Answer acceptance domain service."""

import logfire

from ask.domain.error import (
    AnswerNotFoundError,
    NotFoundError,
    NotQuestionOwnerError,
    UnauthenticatedError,
)
from ask.domain.model.event import AnswerAccepted
from ask.domain.model.tally import AcceptanceResult
from ask.domain.repository import AnswerRepository, QuestionRepository, TransactionManager
from ask.domain.value import AnswerId, QuestionId, UserId

from .base import Service
from .reaction_dispatcher import ReactionDispatcher


class AcceptanceService(Service):
    """Domain service that resolves a question's accepted answer.

    Business rules:
    - Only the question's author can accept an answer
    - A question has at most one accepted answer at any time
    - Accepting another answer replaces the current one
    - Re-accepting the current answer is a successful no-op
    """

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        transaction_manager: TransactionManager,
        reaction_dispatcher: ReactionDispatcher,
    ) -> None:
        """Initialize acceptance service.

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

    async def accept_answer(
        self,
        requester_id: UserId | None,
        question_id: QuestionId,
        answer_id: AnswerId,
    ) -> AcceptanceResult:
        """Accept an answer on behalf of the question's author.

        The question row is locked for the duration of the transaction so
        concurrent acceptances on the same question apply one after the
        other; the last one to commit wins.

        Args:
            requester_id: User asking to accept (None if not authenticated)
            question_id: Question ID
            answer_id: Answer ID

        Returns:
            Acceptance result

        Raises:
            UnauthenticatedError: If no requester is supplied
            NotFoundError: If the question doesn't exist
            NotQuestionOwnerError: If the requester didn't ask the question
            AnswerNotFoundError: If the answer doesn't belong to the question
        """
        if requester_id is None:
            logfire.warn("Anonymous accept attempt", question_id=str(question_id))
            raise UnauthenticatedError("accept an answer")

        with logfire.span(
            "acceptance_service.accept_answer",
            requester_id=str(requester_id),
            question_id=str(question_id),
            answer_id=str(answer_id),
        ):
            async with self.transaction_manager.transaction():
                question = await self.question_repository.lock_by_id(question_id)
                if not question:
                    logfire.warn(
                        "Accept on non-existent question", question_id=str(question_id)
                    )
                    raise NotFoundError("Question", str(question_id))

                if question.author_id != requester_id:
                    logfire.warn(
                        "Accept by non-owner",
                        question_id=str(question_id),
                        requester_id=str(requester_id),
                    )
                    raise NotQuestionOwnerError(str(question_id), str(requester_id))

                answer = await self.answer_repository.find_by_id(answer_id)
                if not answer or answer.question_id != question_id:
                    logfire.warn(
                        "Accept of answer outside question",
                        question_id=str(question_id),
                        answer_id=str(answer_id),
                    )
                    raise AnswerNotFoundError(str(answer_id), str(question_id))

                previous = await self.answer_repository.find_accepted(question_id)
                if previous and previous.id == answer_id:
                    logfire.info(
                        "Answer already accepted",
                        question_id=str(question_id),
                        answer_id=str(answer_id),
                    )
                    return AcceptanceResult(
                        question_id=question_id,
                        answer_id=answer_id,
                        changed=False,
                        previous_answer_id=answer_id,
                    )

                await self.answer_repository.set_accepted(question_id, answer_id)

            logfire.info(
                "Answer accepted",
                question_id=str(question_id),
                answer_id=str(answer_id),
                replaced=str(previous.id) if previous else None,
            )

            self.reaction_dispatcher.notify(
                AnswerAccepted(
                    question_owner_id=question.author_id,
                    question_id=question_id,
                    answer_id=answer_id,
                    answer_author_id=answer.author_id,
                )
            )

            return AcceptanceResult(
                question_id=question_id,
                answer_id=answer_id,
                changed=True,
                previous_answer_id=previous.id if previous else None,
            )
