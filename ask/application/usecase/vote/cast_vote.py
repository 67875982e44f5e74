"""Cast vote use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from ask.application.usecase.base import BaseUseCase
from ask.domain.service import VoteService
from ask.domain.value import Target, TargetKind, UserId, VoteDirection, VoteOutcome


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    target_kind: TargetKind
    target_id: str  # UUID string
    direction: VoteDirection
    user_id: Optional[str] = None  # None when the caller is anonymous


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    target_kind: TargetKind
    target_id: str
    outcome: VoteOutcome
    direction: Optional[VoteDirection]
    delta: int
    tally: int


class CastVoteUseCase(BaseUseCase[CastVoteRequest, CastVoteResponse]):
    """Use case for voting on a question or answer."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Cast vote response with the applied delta and new tally

        Raises:
            UnauthenticatedError: If no user is attached to the request
            InvalidTargetError: If the item doesn't exist
        """
        voter_id = UserId(UUID(request.user_id)) if request.user_id else None
        target = Target(id=UUID(request.target_id), kind=request.target_kind)

        result = await self.vote_service.cast_vote(voter_id, target, request.direction)

        return CastVoteResponse(
            target_kind=result.target.kind,
            target_id=str(result.target.id),
            outcome=result.outcome,
            direction=result.direction,
            delta=result.delta,
            tally=result.tally,
        )
