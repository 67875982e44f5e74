"""Question aggregate root.

Only the fields the voting core needs are modelled here. Title, body and
tags live in the content store.
"""

from datetime import datetime

from pydantic import Field

from ask.domain.model.common import DomainModel
from ask.domain.value import QuestionId, UserId


class Question(DomainModel):
    """Question aggregate root.

    - author_id: read for ownership checks when accepting answers
    - votes: cached tally, updated alongside every vote mutation
    - view_count: monotonically non-decreasing
    """

    id: QuestionId
    author_id: UserId
    votes: int = 0
    view_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
