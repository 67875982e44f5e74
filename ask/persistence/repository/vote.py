"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional, Sequence
from uuid import UUID, uuid4

import logfire
from sqlalchemy import and_, case, delete, func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from ask.domain.error import StorageUnavailableError
from ask.domain.model import Vote
from ask.domain.repository import VoteRepository
from ask.domain.value import Target, TargetKind, UserId, VoteDirection, VoteOutcome
from ask.persistence.mappers import row_to_vote
from ask.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession, max_cast_attempts: int = 5) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            max_cast_attempts: Insert-or-lock cycles before a cast gives up
        """
        self.session = session
        self.max_cast_attempts = max_cast_attempts

    @staticmethod
    def _pair(voter_id: UserId, target: Target):
        return and_(
            votes_table.c.voter_id == voter_id,
            votes_table.c.target_kind == target.kind.value,
            votes_table.c.target_id == target.id,
        )

    async def find_by_voter_and_target(
        self, voter_id: UserId, target: Target
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific item."""
        stmt = select(votes_table).where(self._pair(voter_id, target))
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_voter_and_targets(
        self,
        voter_id: UserId,
        target_kind: TargetKind,
        target_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find a voter's votes on multiple items (batch query)."""
        if not target_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.voter_id == voter_id,
                votes_table.c.target_kind == target_kind.value,
                votes_table.c.target_id.in_(target_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def cast(
        self, voter_id: UserId, target: Target, direction: VoteDirection
    ) -> VoteOutcome:
        """Create, retract or flip the pair's vote.

        The insert is attempted first with ON CONFLICT DO NOTHING, which
        waits for any concurrent uncommitted insert of the same pair. If a
        row already exists it is locked with FOR UPDATE before being
        toggled, so concurrent casts on the pair apply one at a time.
        If the row disappears between the two statements (a concurrent
        retraction committed), the cycle is retried.
        """
        for attempt in range(1, self.max_cast_attempts + 1):
            insert_stmt = (
                insert(votes_table)
                .values(
                    id=uuid4(),
                    voter_id=voter_id,
                    target_kind=target.kind.value,
                    target_id=target.id,
                    direction=direction.value,
                )
                .on_conflict_do_nothing(constraint="unique_vote")
                .returning(votes_table.c.id)
            )
            inserted = await self.session.execute(insert_stmt)
            if inserted.fetchone() is not None:
                await self.session.flush()
                return VoteOutcome.CREATED

            lock_stmt = (
                select(votes_table.c.id, votes_table.c.direction)
                .where(self._pair(voter_id, target))
                .with_for_update()
            )
            existing = (await self.session.execute(lock_stmt)).fetchone()
            if existing is None:
                logfire.debug(
                    "Vote removed during cast, retrying",
                    voter_id=str(voter_id),
                    target=str(target),
                    attempt=attempt,
                )
                continue

            outcome = VoteOutcome.resolve(VoteDirection(existing.direction), direction)
            if outcome is VoteOutcome.RETRACTED:
                await self.session.execute(
                    delete(votes_table).where(votes_table.c.id == existing.id)
                )
            else:
                await self.session.execute(
                    update(votes_table)
                    .where(votes_table.c.id == existing.id)
                    .values(direction=direction.value)
                )
            await self.session.flush()
            return outcome

        logfire.error(
            "Vote cast gave up under contention",
            voter_id=str(voter_id),
            target=str(target),
            attempts=self.max_cast_attempts,
        )
        raise StorageUnavailableError(f"Could not apply vote on {target}, retry later")

    async def tally(self, target: Target) -> int:
        """Sum vote weights on an item."""
        weight = case((votes_table.c.direction == VoteDirection.UP.value, 1), else_=-1)
        stmt = select(func.coalesce(func.sum(weight), 0)).where(
            and_(
                votes_table.c.target_kind == target.kind.value,
                votes_table.c.target_id == target.id,
            )
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one())
