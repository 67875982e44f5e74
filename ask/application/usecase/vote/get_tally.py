"""Get tally use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from ask.application.usecase.base import BaseUseCase
from ask.domain.error import AnswerNotFoundError, InvalidTargetError
from ask.domain.service import TallyService
from ask.domain.value import AnswerId, Target, TargetKind, UserId, VoteDirection


class GetTallyRequest(BaseModel):
    """Get tally request."""

    target_kind: TargetKind
    target_id: str  # UUID string
    user_id: Optional[str] = None


class GetTallyResponse(BaseModel):
    """Get tally response."""

    target_kind: TargetKind
    target_id: str
    tally: int
    user_vote: Optional[VoteDirection] = None  # Viewer's own vote, if any
    is_accepted: Optional[bool] = None  # Only set for answers


class GetTallyUseCase(BaseUseCase[GetTallyRequest, GetTallyResponse]):
    """Use case for reading the score of a question or answer."""

    def __init__(self, tally_service: TallyService) -> None:
        """Initialize get tally use case.

        Args:
            tally_service: Tally domain service
        """
        self.tally_service = tally_service

    async def execute(self, request: GetTallyRequest) -> GetTallyResponse:
        """Execute get tally flow.

        Raises:
            InvalidTargetError: If the question or answer doesn't exist
        """
        target_id = UUID(request.target_id)

        is_accepted = None
        if request.target_kind == TargetKind.ANSWER:
            try:
                state = await self.tally_service.get_answer_state(AnswerId(target_id))
            except AnswerNotFoundError:
                raise InvalidTargetError(str(Target.answer(target_id)))
            tally = state.tally
            is_accepted = state.is_accepted
        else:
            tally = await self.tally_service.get_tally(Target.question(target_id))

        user_vote = None
        if request.user_id:
            votes = await self.tally_service.get_user_votes(
                UserId(UUID(request.user_id)), request.target_kind, [target_id]
            )
            user_vote = votes.get(target_id)

        return GetTallyResponse(
            target_kind=request.target_kind,
            target_id=str(target_id),
            tally=tally,
            user_vote=user_vote,
            is_accepted=is_accepted,
        )
