"""Record view use case."""

from uuid import UUID

from pydantic import BaseModel

from ask.application.usecase.base import BaseUseCase
from ask.domain.service import ViewCounterService
from ask.domain.value import QuestionId


class RecordViewRequest(BaseModel):
    """Record view request."""

    question_id: str


class RecordViewResponse(BaseModel):
    """Record view response."""

    question_id: str
    view_count: int


class RecordViewUseCase(BaseUseCase[RecordViewRequest, RecordViewResponse]):
    """Use case for counting a page view of a question."""

    def __init__(self, view_counter_service: ViewCounterService) -> None:
        """Initialize record view use case.

        Args:
            view_counter_service: View counter domain service
        """
        self.view_counter_service = view_counter_service

    async def execute(self, request: RecordViewRequest) -> RecordViewResponse:
        """Execute record view flow.

        Raises:
            NotFoundError: If the question doesn't exist
        """
        view_count = await self.view_counter_service.record_view(
            QuestionId(UUID(request.question_id))
        )
        return RecordViewResponse(
            question_id=request.question_id, view_count=view_count
        )
