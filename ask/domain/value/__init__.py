"""Domain value objects for Ask."""

from ask.domain.value.identifiers import AnswerId, QuestionId, UserId, VoteId
from ask.domain.value.types import Target, TargetKind, VoteDirection, VoteOutcome

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "VoteId",
    # Types
    "Target",
    "TargetKind",
    "VoteDirection",
    "VoteOutcome",
]
