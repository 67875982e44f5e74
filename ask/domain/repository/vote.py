"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from uuid import UUID

from ask.domain.model.vote import Vote
from ask.domain.value import Target, TargetKind, UserId, VoteDirection, VoteOutcome


class VoteRepository(ABC):
    """Repository for Vote entity (the vote ledger).

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_voter_and_target(
        self, voter_id: UserId, target: Target
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific item.

        Args:
            voter_id: The voter's ID
            target: Question or answer reference

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_voter_and_targets(
        self,
        voter_id: UserId,
        target_kind: TargetKind,
        target_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find a voter's votes on multiple items (batch query).

        Args:
            voter_id: The voter's ID
            target_kind: Kind of the items (question or answer)
            target_ids: Item IDs to check

        Returns:
            Votes by the voter on the specified items
        """
        pass

    @abstractmethod
    async def cast(
        self, voter_id: UserId, target: Target, direction: VoteDirection
    ) -> VoteOutcome:
        """Apply a cast to the (voter, target) pair as one atomic step.

        Creates, retracts or flips the pair's vote according to
        VoteOutcome.resolve. Concurrent casts on the same pair are
        serialized; casts on different pairs do not block each other.

        Args:
            voter_id: The voter's ID
            target: Question or answer reference
            direction: Requested direction

        Returns:
            The outcome that was applied
        """
        pass

    @abstractmethod
    async def tally(self, target: Target) -> int:
        """Sum vote weights on an item (up votes minus down votes).

        Args:
            target: Question or answer reference

        Returns:
            Net score of the item
        """
        pass
