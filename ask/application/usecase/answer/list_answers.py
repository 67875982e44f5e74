"""List answers use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from ask.application.usecase.base import BaseUseCase
from ask.domain.service import TallyService
from ask.domain.value import QuestionId, TargetKind, UserId, VoteDirection


class ListAnswersRequest(BaseModel):
    """List answers request."""

    question_id: str
    user_id: Optional[str] = None


class AnswerListItem(BaseModel):
    """One answer in display order."""

    answer_id: str
    tally: int
    is_accepted: bool
    user_vote: Optional[VoteDirection] = None  # Viewer's own vote, if any


class ListAnswersResponse(BaseModel):
    """List answers response."""

    question_id: str
    answers: list[AnswerListItem]


class ListAnswersUseCase(BaseUseCase[ListAnswersRequest, ListAnswersResponse]):
    """Use case for showing a question's answers with their scores."""

    def __init__(self, tally_service: TallyService) -> None:
        self.tally_service = tally_service

    async def execute(self, request: ListAnswersRequest) -> ListAnswersResponse:
        """Execute list answers flow.

        Raises:
            NotFoundError: If the question doesn't exist
        """
        question_id = QuestionId(UUID(request.question_id))
        states = await self.tally_service.list_answer_states(question_id)

        user_votes: dict[UUID, Optional[VoteDirection]] = {}
        if request.user_id and states:
            # One batch lookup for the viewer's arrows
            user_votes = await self.tally_service.get_user_votes(
                UserId(UUID(request.user_id)),
                TargetKind.ANSWER,
                [state.answer_id for state in states],
            )

        return ListAnswersResponse(
            question_id=str(question_id),
            answers=[
                AnswerListItem(
                    answer_id=str(state.answer_id),
                    tally=state.tally,
                    is_accepted=state.is_accepted,
                    user_vote=user_votes.get(state.answer_id),
                )
                for state in states
            ],
        )
