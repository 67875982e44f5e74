"""Unit tests for AcceptanceService."""

import asyncio
from uuid import uuid4

import pytest

from ask.domain.error import (
    AnswerNotFoundError,
    NotFoundError,
    NotQuestionOwnerError,
    UnauthenticatedError,
)
from ask.domain.model import AnswerAccepted
from ask.domain.repository import AnswerRepository, QuestionRepository
from ask.domain.service import AcceptanceService, NotificationClient, ReactionDispatcher
from ask.domain.value import AnswerId, QuestionId, UserId
from tests.factory import make_answer, make_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _question_with_answers(unit_env, count: int = 2):
    question_repo = await unit_env.get(QuestionRepository)
    answer_repo = await unit_env.get(AnswerRepository)

    owner_id = UserId(uuid4())
    question = await question_repo.save(make_question(owner_id))
    answers = [await answer_repo.save(make_answer(question)) for _ in range(count)]
    return owner_id, question, answers


async def _accepted_ids(unit_env, question_id: QuestionId) -> list[AnswerId]:
    answer_repo = await unit_env.get(AnswerRepository)
    return [a.id for a in await answer_repo.find_by_question(question_id) if a.is_accepted]


class TestAcceptAnswer:
    """Tests for accept_answer."""

    @pytest.mark.asyncio
    async def test_owner_accepts_answer(self, unit_env):
        """Owner accepting an answer should mark it and notify its author."""
        # Arrange
        acceptance_service = await unit_env.get(AcceptanceService)
        dispatcher = await unit_env.get(ReactionDispatcher)
        notification_client = await unit_env.get(NotificationClient)
        owner_id, question, (answer, _) = await _question_with_answers(unit_env)

        # Act
        result = await acceptance_service.accept_answer(
            owner_id, question.id, answer.id
        )
        await dispatcher.drain()

        # Assert
        assert result.changed is True
        assert result.previous_answer_id is None
        assert await _accepted_ids(unit_env, question.id) == [answer.id]

        assert len(notification_client.delivered) == 1
        event = notification_client.delivered[0]
        assert isinstance(event, AnswerAccepted)
        assert event.question_owner_id == owner_id
        assert event.answer_author_id == answer.author_id
        assert event.answer_id == answer.id

    @pytest.mark.asyncio
    async def test_accepting_second_answer_replaces_first(self, unit_env):
        """After accepting a1 then a2, only a2 is accepted."""
        # Arrange
        acceptance_service = await unit_env.get(AcceptanceService)
        answer_repo = await unit_env.get(AnswerRepository)
        owner_id, question, (a1, a2) = await _question_with_answers(unit_env)

        # Act
        await acceptance_service.accept_answer(owner_id, question.id, a1.id)
        result = await acceptance_service.accept_answer(owner_id, question.id, a2.id)

        # Assert
        assert result.changed is True
        assert result.previous_answer_id == a1.id
        assert (await answer_repo.find_by_id(a2.id)).is_accepted is True
        assert (await answer_repo.find_by_id(a1.id)).is_accepted is False

    @pytest.mark.asyncio
    async def test_reaccepting_is_noop_without_event(self, unit_env):
        """Accepting the already accepted answer succeeds and notifies nobody."""
        # Arrange
        acceptance_service = await unit_env.get(AcceptanceService)
        dispatcher = await unit_env.get(ReactionDispatcher)
        notification_client = await unit_env.get(NotificationClient)
        owner_id, question, (answer, _) = await _question_with_answers(unit_env)
        await acceptance_service.accept_answer(owner_id, question.id, answer.id)

        # Act
        result = await acceptance_service.accept_answer(
            owner_id, question.id, answer.id
        )
        await dispatcher.drain()

        # Assert
        assert result.changed is False
        assert await _accepted_ids(unit_env, question.id) == [answer.id]
        assert len(notification_client.delivered) == 1

    @pytest.mark.asyncio
    async def test_non_owner_is_rejected_and_state_unchanged(self, unit_env):
        """Non-owners should get NotQuestionOwnerError and change nothing."""
        # Arrange
        acceptance_service = await unit_env.get(AcceptanceService)
        owner_id, question, (a1, a2) = await _question_with_answers(unit_env)
        await acceptance_service.accept_answer(owner_id, question.id, a1.id)

        # Act & Assert
        with pytest.raises(NotQuestionOwnerError):
            await acceptance_service.accept_answer(
                UserId(uuid4()), question.id, a2.id
            )

        assert await _accepted_ids(unit_env, question.id) == [a1.id]

    @pytest.mark.asyncio
    async def test_answer_author_cannot_accept_own_answer(self, unit_env):
        acceptance_service = await unit_env.get(AcceptanceService)
        _, question, (answer, _) = await _question_with_answers(unit_env)

        with pytest.raises(NotQuestionOwnerError):
            await acceptance_service.accept_answer(
                answer.author_id, question.id, answer.id
            )

    @pytest.mark.asyncio
    async def test_answer_of_other_question_is_rejected(self, unit_env):
        """An answer belonging to another question should not be accepted."""
        # Arrange
        acceptance_service = await unit_env.get(AcceptanceService)
        owner_id, question, _ = await _question_with_answers(unit_env)
        _, _, (foreign_answer,) = await _question_with_answers(unit_env, count=1)

        # Act & Assert
        with pytest.raises(AnswerNotFoundError):
            await acceptance_service.accept_answer(
                owner_id, question.id, foreign_answer.id
            )

        assert await _accepted_ids(unit_env, question.id) == []

    @pytest.mark.asyncio
    async def test_unknown_answer_is_rejected(self, unit_env):
        acceptance_service = await unit_env.get(AcceptanceService)
        owner_id, question, _ = await _question_with_answers(unit_env)

        with pytest.raises(AnswerNotFoundError):
            await acceptance_service.accept_answer(
                owner_id, question.id, AnswerId(uuid4())
            )

    @pytest.mark.asyncio
    async def test_unknown_question_raises_not_found(self, unit_env):
        acceptance_service = await unit_env.get(AcceptanceService)

        with pytest.raises(NotFoundError):
            await acceptance_service.accept_answer(
                UserId(uuid4()), QuestionId(uuid4()), AnswerId(uuid4())
            )

    @pytest.mark.asyncio
    async def test_anonymous_requester_is_rejected(self, unit_env):
        acceptance_service = await unit_env.get(AcceptanceService)
        _, question, (answer, _) = await _question_with_answers(unit_env)

        with pytest.raises(UnauthenticatedError):
            await acceptance_service.accept_answer(None, question.id, answer.id)

    @pytest.mark.asyncio
    async def test_concurrent_accepts_leave_exactly_one_accepted(self, unit_env):
        """Racing accepts of A1 and A2 never end with both or neither."""
        # Arrange
        acceptance_service = await unit_env.get(AcceptanceService)
        owner_id, question, (a1, a2) = await _question_with_answers(unit_env)

        # Act
        results = await asyncio.gather(
            acceptance_service.accept_answer(owner_id, question.id, a1.id),
            acceptance_service.accept_answer(owner_id, question.id, a2.id),
        )

        # Assert
        accepted = await _accepted_ids(unit_env, question.id)
        assert len(accepted) == 1
        assert accepted[0] in (a1.id, a2.id)

        # The one that committed last replaced the other
        last = next(r for r in results if r.previous_answer_id is not None)
        assert accepted == [last.answer_id]

    @pytest.mark.asyncio
    async def test_delivery_failure_does_not_fail_acceptance(self, unit_env):
        """A failing notification service must not undo the acceptance."""
        # Arrange
        acceptance_service = await unit_env.get(AcceptanceService)
        dispatcher = await unit_env.get(ReactionDispatcher)
        notification_client = await unit_env.get(NotificationClient)
        notification_client.fail = True
        owner_id, question, (answer, _) = await _question_with_answers(unit_env)

        # Act
        result = await acceptance_service.accept_answer(
            owner_id, question.id, answer.id
        )
        await dispatcher.drain()

        # Assert
        assert result.changed is True
        assert await _accepted_ids(unit_env, question.id) == [answer.id]
        assert notification_client.delivered == []
