"""Submit answer use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from ask.application.usecase.base import BaseUseCase
from ask.domain.service import AnswerService
from ask.domain.value import QuestionId, UserId


class SubmitAnswerRequest(BaseModel):
    """Submit answer request."""

    question_id: str
    user_id: Optional[str] = None


class SubmitAnswerResponse(BaseModel):
    """Submit answer response."""

    answer_id: str
    question_id: str
    author_id: str
    created_at: datetime


class SubmitAnswerUseCase(BaseUseCase[SubmitAnswerRequest, SubmitAnswerResponse]):
    """Use case for answering a question."""

    def __init__(self, answer_service: AnswerService) -> None:
        self.answer_service = answer_service

    async def execute(self, request: SubmitAnswerRequest) -> SubmitAnswerResponse:
        author_id = UserId(UUID(request.user_id)) if request.user_id else None

        answer = await self.answer_service.submit_answer(
            author_id, QuestionId(UUID(request.question_id))
        )

        return SubmitAnswerResponse(
            answer_id=str(answer.id),
            question_id=str(answer.question_id),
            author_id=str(answer.author_id),
            created_at=answer.created_at,
        )
