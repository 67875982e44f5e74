"""Answer entity."""

from datetime import datetime

from pydantic import Field

from ask.domain.model.common import DomainModel
from ask.domain.value import AnswerId, QuestionId, UserId


class Answer(DomainModel):
    """Answer entity.

    At most one answer per question has is_accepted set.
    """

    id: AnswerId
    question_id: QuestionId
    author_id: UserId
    votes: int = 0
    is_accepted: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
