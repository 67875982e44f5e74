"""Tally domain service."""

from typing import Optional
from uuid import UUID

import logfire

from ask.domain.error import AnswerNotFoundError, InvalidTargetError, NotFoundError
from ask.domain.model.tally import AnswerState
from ask.domain.repository import AnswerRepository, QuestionRepository, VoteRepository
from ask.domain.value import AnswerId, QuestionId, Target, TargetKind, UserId, VoteDirection

from .base import Service


class TallyService(Service):
    """Domain service for reading vote tallies and acceptance state."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        """Initialize tally service.

        Args:
            vote_repository: Vote repository
            question_repository: Question repository
            answer_repository: Answer repository
        """
        self.vote_repository = vote_repository
        self.question_repository = question_repository
        self.answer_repository = answer_repository

    async def target_exists(self, target: Target) -> bool:
        """Check that a target refers to an existing question or answer."""
        if target.kind == TargetKind.QUESTION:
            question = await self.question_repository.find_by_id(QuestionId(target.id))
            return question is not None
        answer = await self.answer_repository.find_by_id(AnswerId(target.id))
        return answer is not None

    async def get_tally(self, target: Target) -> int:
        """Get the net score of a question or answer.

        Always summed from the committed vote ledger.

        Args:
            target: Question or answer reference

        Returns:
            Up votes minus down votes

        Raises:
            InvalidTargetError: If the target doesn't exist
        """
        with logfire.span("tally_service.get_tally", target=str(target)):
            if not await self.target_exists(target):
                logfire.warn("Tally of non-existent target", target=str(target))
                raise InvalidTargetError(str(target))

            return await self.vote_repository.tally(target)

    async def get_answer_state(self, answer_id: AnswerId) -> AnswerState:
        """Get an answer's tally together with its acceptance flag.

        Args:
            answer_id: Answer ID

        Returns:
            Tally and acceptance state

        Raises:
            AnswerNotFoundError: If the answer doesn't exist
        """
        with logfire.span("tally_service.get_answer_state", answer_id=str(answer_id)):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer:
                raise AnswerNotFoundError(str(answer_id))

            tally = await self.vote_repository.tally(Target.answer(answer_id))
            return AnswerState(
                answer_id=answer_id, tally=tally, is_accepted=answer.is_accepted
            )

    async def list_answer_states(self, question_id: QuestionId) -> list[AnswerState]:
        """List a question's answers in display order.

        The accepted answer comes first, then higher tallies, then older
        answers. Tallies come from the cached counter, which every cast
        adjusts in the same transaction as the ledger.

        Args:
            question_id: Question ID

        Returns:
            Tally and acceptance state of each answer

        Raises:
            NotFoundError: If the question doesn't exist
        """
        with logfire.span(
            "tally_service.list_answer_states", question_id=str(question_id)
        ):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                raise NotFoundError("Question", str(question_id))

            answers = await self.answer_repository.find_by_question(question_id)
            return [
                AnswerState(
                    answer_id=answer.id,
                    tally=answer.votes,
                    is_accepted=answer.is_accepted,
                )
                for answer in answers
            ]

    async def get_user_votes(
        self, voter_id: UserId, target_kind: TargetKind, target_ids: list[UUID]
    ) -> dict[UUID, Optional[VoteDirection]]:
        """Look up which direction a voter cast on each of several items.

        Args:
            voter_id: Voter ID
            target_kind: Kind of the items
            target_ids: Item IDs to check

        Returns:
            Mapping of item ID to the voter's direction (None if not voted)
        """
        if not target_ids:
            return {}

        # Batch query to fetch all votes at once (avoid N+1)
        votes = await self.vote_repository.find_by_voter_and_targets(
            voter_id=voter_id,
            target_kind=target_kind,
            target_ids=target_ids,
        )
        directions = {vote.target_id: vote.direction for vote in votes}
        return {tid: directions.get(tid) for tid in target_ids}
