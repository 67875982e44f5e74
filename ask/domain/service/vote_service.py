"""Vote domain service."""

import logfire

from ask.domain.error import InvalidTargetError, UnauthenticatedError
from ask.domain.model.tally import TallyDelta
from ask.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    TransactionManager,
    VoteRepository,
)
from ask.domain.value import AnswerId, QuestionId, Target, TargetKind, UserId, VoteDirection

from .base import Service
from .tally_service import TallyService


class VoteService(Service):
    """Domain service for vote operations (the vote ledger)."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        tally_service: TallyService,
        transaction_manager: TransactionManager,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            question_repository: Question repository
            answer_repository: Answer repository
            tally_service: Tally domain service
            transaction_manager: Transaction boundary
        """
        self.vote_repository = vote_repository
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.tally_service = tally_service
        self.transaction_manager = transaction_manager

    async def cast_vote(
        self,
        voter_id: UserId | None,
        target: Target,
        direction: VoteDirection,
    ) -> TallyDelta:
        """Cast a vote on a question or answer.

        The first cast creates a vote, casting the same direction again
        retracts it and casting the opposite direction flips it. The ledger
        change and the cached counter update commit together.

        Args:
            voter_id: Voter ID (None if the caller isn't authenticated)
            target: Question or answer reference
            direction: Up or down

        Returns:
            The applied change and the fresh tally

        Raises:
            UnauthenticatedError: If no voter is supplied
            InvalidTargetError: If the target doesn't exist
            StorageUnavailableError: If the store failed (nothing was applied)
        """
        if voter_id is None:
            logfire.warn("Anonymous vote attempt", target=str(target))
            raise UnauthenticatedError("vote")

        with logfire.span(
            "vote_service.cast_vote",
            voter_id=str(voter_id),
            target=str(target),
            direction=direction.value,
        ):
            async with self.transaction_manager.transaction():
                if not await self.tally_service.target_exists(target):
                    logfire.warn("Vote on non-existent target", target=str(target))
                    raise InvalidTargetError(str(target))

                outcome = await self.vote_repository.cast(voter_id, target, direction)
                delta = outcome.delta(direction)

                if target.kind == TargetKind.QUESTION:
                    await self.question_repository.adjust_votes(
                        QuestionId(target.id), delta
                    )
                else:
                    await self.answer_repository.adjust_votes(AnswerId(target.id), delta)

                tally = await self.vote_repository.tally(target)

            logfire.info(
                "Vote cast",
                voter_id=str(voter_id),
                target=str(target),
                outcome=outcome.value,
                delta=delta,
                tally=tally,
            )

            return TallyDelta(
                target=target,
                outcome=outcome,
                direction=outcome.resulting_direction(direction),
                delta=delta,
                tally=tally,
            )
