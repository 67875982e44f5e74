"""Register question use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from ask.application.usecase.base import BaseUseCase
from ask.domain.service import QuestionService
from ask.domain.value import UserId


class RegisterQuestionRequest(BaseModel):
    """Register question request."""

    user_id: Optional[str] = None


class RegisterQuestionResponse(BaseModel):
    """Register question response."""

    question_id: str
    author_id: str
    votes: int
    view_count: int
    created_at: datetime


class RegisterQuestionUseCase(
    BaseUseCase[RegisterQuestionRequest, RegisterQuestionResponse]
):
    """Use case for registering a new question with the voting core."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(
        self, request: RegisterQuestionRequest
    ) -> RegisterQuestionResponse:
        author_id = UserId(UUID(request.user_id)) if request.user_id else None

        question = await self.question_service.register_question(author_id)

        return RegisterQuestionResponse(
            question_id=str(question.id),
            author_id=str(question.author_id),
            votes=question.votes,
            view_count=question.view_count,
            created_at=question.created_at,
        )
