"""Answer routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status

from ask.application.usecase.answer import (
    AcceptAnswerRequest,
    AcceptAnswerResponse,
    AcceptAnswerUseCase,
    ListAnswersRequest,
    ListAnswersResponse,
    ListAnswersUseCase,
    SubmitAnswerRequest,
    SubmitAnswerResponse,
    SubmitAnswerUseCase,
)
from ask.domain.service import IdentityService

router = APIRouter(prefix="/questions", tags=["answers"], route_class=DishkaRoute)


@router.get("/{question_id}/answers", response_model=ListAnswersResponse)
async def list_answers(
    question_id: UUID,
    list_answers_use_case: FromDishka[ListAnswersUseCase],
    identity: FromDishka[IdentityService],
    auth_token: str | None = Cookie(default=None),
) -> ListAnswersResponse:
    """List a question's answers, accepted first, then by score.

    Signed-in viewers also see which way they voted on each answer.
    """
    user_id = identity.authenticate(auth_token)
    request = ListAnswersRequest(
        question_id=str(question_id),
        user_id=str(user_id) if user_id else None,
    )
    return await list_answers_use_case.execute(request)


@router.post(
    "/{question_id}/answers",
    response_model=SubmitAnswerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_answer(
    question_id: UUID,
    submit_answer_use_case: FromDishka[SubmitAnswerUseCase],
    identity: FromDishka[IdentityService],
    auth_token: str | None = Cookie(default=None),
) -> SubmitAnswerResponse:
    """Answer a question.

    Requires authentication. The question's author is notified unless
    they answered their own question.
    """
    user_id = identity.authenticate(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to answer",
        )

    request = SubmitAnswerRequest(question_id=str(question_id), user_id=str(user_id))
    return await submit_answer_use_case.execute(request)


@router.post(
    "/{question_id}/answers/{answer_id}/accept",
    response_model=AcceptAnswerResponse,
)
async def accept_answer(
    question_id: UUID,
    answer_id: UUID,
    accept_answer_use_case: FromDishka[AcceptAnswerUseCase],
    identity: FromDishka[IdentityService],
    auth_token: str | None = Cookie(default=None),
) -> AcceptAnswerResponse:
    """Accept an answer, replacing any previously accepted one.

    Requires authentication as the question's author.

    Args:
        question_id: Question UUID
        answer_id: Answer UUID
        accept_answer_use_case: Accept answer use case from DI
        identity: Identity verification service (injected)
        auth_token: JWT token from cookie

    Returns:
        Acceptance result

    Raises:
        HTTPException: If not authenticated (other errors are mapped by the
            application's domain error handlers)
    """
    user_id = identity.authenticate(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to accept an answer",
        )

    request = AcceptAnswerRequest(
        question_id=str(question_id),
        answer_id=str(answer_id),
        user_id=str(user_id),
    )
    return await accept_answer_use_case.execute(request)
