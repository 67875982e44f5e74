"""Accept answer use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from ask.application.usecase.base import BaseUseCase
from ask.domain.service import AcceptanceService
from ask.domain.value import AnswerId, QuestionId, UserId


class AcceptAnswerRequest(BaseModel):
    """Accept answer request."""

    question_id: str
    answer_id: str
    user_id: Optional[str] = None


class AcceptAnswerResponse(BaseModel):
    """Accept answer response."""

    question_id: str
    answer_id: str
    changed: bool
    previous_answer_id: Optional[str] = None


class AcceptAnswerUseCase(BaseUseCase[AcceptAnswerRequest, AcceptAnswerResponse]):
    """Use case for a question author accepting one of its answers."""

    def __init__(self, acceptance_service: AcceptanceService) -> None:
        """Initialize accept answer use case.

        Args:
            acceptance_service: Acceptance domain service
        """
        self.acceptance_service = acceptance_service

    async def execute(self, request: AcceptAnswerRequest) -> AcceptAnswerResponse:
        """Execute accept answer flow.

        Args:
            request: Accept answer request

        Returns:
            Which answer is accepted now and which one it replaced

        Raises:
            UnauthenticatedError: If no user is attached to the request
            NotFoundError: If the question doesn't exist
            NotQuestionOwnerError: If the user didn't ask the question
            AnswerNotFoundError: If the answer isn't one of the question's
        """
        requester_id = UserId(UUID(request.user_id)) if request.user_id else None

        result = await self.acceptance_service.accept_answer(
            requester_id,
            QuestionId(UUID(request.question_id)),
            AnswerId(UUID(request.answer_id)),
        )

        return AcceptAnswerResponse(
            question_id=str(result.question_id),
            answer_id=str(result.answer_id),
            changed=result.changed,
            previous_answer_id=(
                str(result.previous_answer_id) if result.previous_answer_id else None
            ),
        )
