"""Domain value objects for Ask.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum
from typing import Optional
from uuid import UUID

from ask.domain.value.common import ValueObject


class VoteDirection(str, Enum):
    """Direction of a vote."""

    UP = "up"
    DOWN = "down"

    @property
    def weight(self) -> int:
        """Contribution of a single vote in this direction to a tally."""
        return 1 if self is VoteDirection.UP else -1


class TargetKind(str, Enum):
    """Type of entity that can be voted on."""

    QUESTION = "question"
    ANSWER = "answer"


class VoteOutcome(str, Enum):
    """What a cast did to the ledger row of a (voter, target) pair.

    Toggle semantics:
    - no prior vote: the vote is created
    - prior vote in the same direction: the vote is retracted (deleted)
    - prior vote in the opposite direction: the vote is flipped
    """

    CREATED = "created"
    RETRACTED = "retracted"
    FLIPPED = "flipped"

    @classmethod
    def resolve(
        cls, existing: Optional[VoteDirection], requested: VoteDirection
    ) -> "VoteOutcome":
        """Decide the outcome of casting `requested` over `existing`."""
        if existing is None:
            return cls.CREATED
        if existing == requested:
            return cls.RETRACTED
        return cls.FLIPPED

    def delta(self, requested: VoteDirection) -> int:
        """Net tally change caused by this outcome.

        Args:
            requested: Direction that was cast

        Returns:
            +-1 for creation or retraction, +-2 for a flip
        """
        if self is VoteOutcome.CREATED:
            return requested.weight
        if self is VoteOutcome.RETRACTED:
            return -requested.weight
        return 2 * requested.weight

    def resulting_direction(
        self, requested: VoteDirection
    ) -> Optional[VoteDirection]:
        """Direction stored for the pair after this outcome (None if retracted)."""
        return None if self is VoteOutcome.RETRACTED else requested


class Target(ValueObject):
    """Tagged reference to a question or an answer.

    Identifies what a vote applies to.
    """

    id: UUID
    kind: TargetKind

    @classmethod
    def question(cls, question_id: UUID) -> "Target":
        return cls(id=question_id, kind=TargetKind.QUESTION)

    @classmethod
    def answer(cls, answer_id: UUID) -> "Target":
        return cls(id=answer_id, kind=TargetKind.ANSWER)

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.id}"
