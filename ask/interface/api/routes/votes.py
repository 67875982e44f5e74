"""Vote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel

from ask.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetTallyRequest,
    GetTallyResponse,
    GetTallyUseCase,
)
from ask.domain.service import IdentityService
from ask.domain.value import TargetKind, VoteDirection

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class VoteBody(BaseModel):
    """Vote request body."""

    direction: VoteDirection


async def _cast(
    target_kind: TargetKind,
    target_id: UUID,
    body: VoteBody,
    cast_vote_use_case: CastVoteUseCase,
    identity: IdentityService,
    auth_token: str | None,
) -> CastVoteResponse:
    user_id = identity.authenticate(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to vote",
        )

    request = CastVoteRequest(
        target_kind=target_kind,
        target_id=str(target_id),
        direction=body.direction,
        user_id=str(user_id),
    )
    return await cast_vote_use_case.execute(request)


@router.post("/questions/{question_id}/vote", response_model=CastVoteResponse)
async def vote_on_question(
    question_id: UUID,
    body: VoteBody,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    identity: FromDishka[IdentityService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote on a question.

    Requires authentication. Casting the same direction twice retracts the
    vote; casting the opposite direction flips it.

    Args:
        question_id: Question UUID
        body: Vote direction
        cast_vote_use_case: Cast vote use case from DI
        identity: Identity verification service (injected)
        auth_token: JWT token from cookie

    Returns:
        Applied delta and the question's new tally
    """
    return await _cast(
        TargetKind.QUESTION,
        question_id,
        body,
        cast_vote_use_case,
        identity,
        auth_token,
    )


@router.post("/answers/{answer_id}/vote", response_model=CastVoteResponse)
async def vote_on_answer(
    answer_id: UUID,
    body: VoteBody,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    identity: FromDishka[IdentityService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote on an answer (same toggle rules as questions)."""
    return await _cast(
        TargetKind.ANSWER,
        answer_id,
        body,
        cast_vote_use_case,
        identity,
        auth_token,
    )


@router.get("/questions/{question_id}/tally", response_model=GetTallyResponse)
async def get_question_tally(
    question_id: UUID,
    get_tally_use_case: FromDishka[GetTallyUseCase],
    identity: FromDishka[IdentityService],
    auth_token: str | None = Cookie(default=None),
) -> GetTallyResponse:
    """Get a question's score, plus the viewer's own vote when signed in."""
    user_id = identity.authenticate(auth_token)
    request = GetTallyRequest(
        target_kind=TargetKind.QUESTION,
        target_id=str(question_id),
        user_id=str(user_id) if user_id else None,
    )
    return await get_tally_use_case.execute(request)


@router.get("/answers/{answer_id}/tally", response_model=GetTallyResponse)
async def get_answer_tally(
    answer_id: UUID,
    get_tally_use_case: FromDishka[GetTallyUseCase],
    identity: FromDishka[IdentityService],
    auth_token: str | None = Cookie(default=None),
) -> GetTallyResponse:
    """Get an answer's score and acceptance flag."""
    user_id = identity.authenticate(auth_token)
    request = GetTallyRequest(
        target_kind=TargetKind.ANSWER,
        target_id=str(answer_id),
        user_id=str(user_id) if user_id else None,
    )
    return await get_tally_use_case.execute(request)
