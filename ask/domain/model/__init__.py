"""Domain model entities for Ask."""

from ask.domain.model.answer import Answer
from ask.domain.model.event import AnswerAccepted, AnswerSubmitted, Event
from ask.domain.model.question import Question
from ask.domain.model.tally import AcceptanceResult, AnswerState, TallyDelta
from ask.domain.model.vote import Vote

__all__ = [
    "Question",
    "Answer",
    "Vote",
    "TallyDelta",
    "AnswerState",
    "AcceptanceResult",
    "AnswerSubmitted",
    "AnswerAccepted",
    "Event",
]
