"""Vote entity.

Votes are up or down judgements on a question or an answer.
Each user holds at most one vote per item.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from ask.domain.model.common import DomainModel
from ask.domain.value import Target, TargetKind, UserId, VoteDirection, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per item (enforced by database unique constraint)
    - Casting the same direction again retracts the vote
    - Casting the opposite direction flips the vote in place
    - Polymorphic reference to the target (question or answer)
    """

    id: VoteId
    voter_id: UserId
    target_kind: TargetKind
    target_id: UUID  # QuestionId or AnswerId (both are UUIDs)
    direction: VoteDirection
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def target(self) -> Target:
        return Target(id=self.target_id, kind=self.target_kind)
