"""Read models returned by vote and acceptance operations."""

from typing import Optional

from ask.domain.model.common import DomainModel
from ask.domain.value import AnswerId, QuestionId, Target, VoteDirection, VoteOutcome


class TallyDelta(DomainModel):
    """Result of casting a vote.

    delta is the net change the cast applied to the target's tally;
    tally is the freshly computed total after the change committed.
    """

    target: Target
    outcome: VoteOutcome
    direction: Optional[VoteDirection]  # None after a retraction
    delta: int
    tally: int


class AnswerState(DomainModel):
    """Current tally and acceptance state of an answer."""

    answer_id: AnswerId
    tally: int
    is_accepted: bool


class AcceptanceResult(DomainModel):
    """Result of accepting an answer."""

    question_id: QuestionId
    answer_id: AnswerId
    changed: bool  # False when the answer was already accepted
    previous_answer_id: Optional[AnswerId] = None
