"""Question routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status

from ask.application.usecase.question import (
    RecordViewRequest,
    RecordViewResponse,
    RecordViewUseCase,
    RegisterQuestionRequest,
    RegisterQuestionResponse,
    RegisterQuestionUseCase,
)
from ask.domain.service import IdentityService

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


@router.post(
    "",
    response_model=RegisterQuestionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register_question(
    register_question_use_case: FromDishka[RegisterQuestionUseCase],
    identity: FromDishka[IdentityService],
    auth_token: str | None = Cookie(default=None),
) -> RegisterQuestionResponse:
    """Register a new question with the voting core.

    Requires authentication. Title and body live in the content store.
    """
    user_id = identity.authenticate(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to ask a question",
        )

    request = RegisterQuestionRequest(user_id=str(user_id))
    return await register_question_use_case.execute(request)


@router.post("/{question_id}/views", response_model=RecordViewResponse)
async def record_view(
    question_id: UUID,
    record_view_use_case: FromDishka[RecordViewUseCase],
) -> RecordViewResponse:
    """Count one page view of a question.

    Args:
        question_id: Question UUID
        record_view_use_case: Record view use case from DI

    Returns:
        View count after this view
    """
    request = RecordViewRequest(question_id=str(question_id))
    return await record_view_use_case.execute(request)
