"""Events emitted after a mutation commits."""

from datetime import datetime
from typing import Literal, Union

from pydantic import Field

from ask.domain.model.common import DomainModel
from ask.domain.value import AnswerId, QuestionId, UserId


class AnswerSubmitted(DomainModel):
    """Someone answered a question."""

    type: Literal["answer_submitted"] = "answer_submitted"
    question_owner_id: UserId
    question_id: QuestionId
    answer_id: AnswerId
    author_id: UserId
    occurred_at: datetime = Field(default_factory=datetime.now)


class AnswerAccepted(DomainModel):
    """A question author accepted an answer."""

    type: Literal["answer_accepted"] = "answer_accepted"
    question_owner_id: UserId
    question_id: QuestionId
    answer_id: AnswerId
    answer_author_id: UserId
    occurred_at: datetime = Field(default_factory=datetime.now)


Event = Union[AnswerSubmitted, AnswerAccepted]
