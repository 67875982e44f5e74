"""In-memory vote repository for testing."""

import asyncio
from typing import List, Optional, Sequence
from uuid import UUID, uuid4

from ask.domain.model.vote import Vote
from ask.domain.repository.vote import VoteRepository
from ask.domain.value import (
    Target,
    TargetKind,
    UserId,
    VoteDirection,
    VoteId,
    VoteOutcome,
)
from ask.persistence.repository.inmemory.locks import RowLocks


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    A cast locks its (voter, target) pair and yields to the event loop
    between reading and writing the pair's vote, so concurrent casts really
    interleave and depend on the lock for a consistent ledger.
    """

    def __init__(self) -> None:
        self._votes: dict[tuple[UserId, TargetKind, UUID], Vote] = {}
        self._locks = RowLocks()

    async def find_by_voter_and_target(
        self, voter_id: UserId, target: Target
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific item."""
        return self._votes.get((voter_id, target.kind, target.id))

    async def find_by_voter_and_targets(
        self,
        voter_id: UserId,
        target_kind: TargetKind,
        target_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find a voter's votes on multiple items (batch query)."""
        if not target_ids:
            return []

        wanted = set(target_ids)
        return [
            v
            for (owner, kind, target_id), v in self._votes.items()
            if owner == voter_id and kind == target_kind and target_id in wanted
        ]

    async def cast(
        self, voter_id: UserId, target: Target, direction: VoteDirection
    ) -> VoteOutcome:
        """Create, retract or flip the pair's vote."""
        key = (voter_id, target.kind, target.id)
        async with self._locks.hold(key):
            existing = self._votes.get(key)
            outcome = VoteOutcome.resolve(
                existing.direction if existing else None, direction
            )
            await asyncio.sleep(0)

            if outcome is VoteOutcome.CREATED:
                self._votes[key] = Vote(
                    id=VoteId(uuid4()),
                    voter_id=voter_id,
                    target_kind=target.kind,
                    target_id=target.id,
                    direction=direction,
                )
            elif outcome is VoteOutcome.RETRACTED:
                del self._votes[key]
            else:
                self._votes[key] = existing.model_copy(
                    update={"direction": direction}
                )

        return outcome

    async def tally(self, target: Target) -> int:
        """Sum vote weights on an item."""
        return sum(
            v.direction.weight
            for (_, kind, target_id), v in self._votes.items()
            if kind == target.kind and target_id == target.id
        )
