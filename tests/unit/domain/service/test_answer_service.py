"""Unit tests for AnswerService."""

from uuid import uuid4

import pytest

from ask.domain.error import NotFoundError, UnauthenticatedError
from ask.domain.model import AnswerSubmitted
from ask.domain.repository import AnswerRepository, QuestionRepository
from ask.domain.service import AnswerService, NotificationClient, ReactionDispatcher
from ask.domain.value import QuestionId, UserId
from tests.factory import make_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSubmitAnswer:
    """Tests for submit_answer."""

    @pytest.mark.asyncio
    async def test_submit_answer_saves_and_notifies_owner(self, unit_env):
        """Answering someone else's question should notify its author."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        question_repo = await unit_env.get(QuestionRepository)
        dispatcher = await unit_env.get(ReactionDispatcher)
        notification_client = await unit_env.get(NotificationClient)

        owner_id = UserId(uuid4())
        author_id = UserId(uuid4())
        question = await question_repo.save(make_question(owner_id))

        # Act
        answer = await answer_service.submit_answer(author_id, question.id)
        await dispatcher.drain()

        # Assert
        saved = await answer_repo.find_by_id(answer.id)
        assert saved is not None
        assert saved.question_id == question.id
        assert saved.author_id == author_id
        assert saved.is_accepted is False
        assert saved.votes == 0

        assert len(notification_client.delivered) == 1
        event = notification_client.delivered[0]
        assert isinstance(event, AnswerSubmitted)
        assert event.question_owner_id == owner_id
        assert event.author_id == author_id
        assert event.answer_id == answer.id

    @pytest.mark.asyncio
    async def test_answering_own_question_sends_no_event(self, unit_env):
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        dispatcher = await unit_env.get(ReactionDispatcher)
        notification_client = await unit_env.get(NotificationClient)

        owner_id = UserId(uuid4())
        question = await question_repo.save(make_question(owner_id))

        # Act
        await answer_service.submit_answer(owner_id, question.id)
        await dispatcher.drain()

        # Assert
        assert notification_client.delivered == []

    @pytest.mark.asyncio
    async def test_unknown_question_raises_not_found(self, unit_env):
        answer_service = await unit_env.get(AnswerService)

        with pytest.raises(NotFoundError):
            await answer_service.submit_answer(UserId(uuid4()), QuestionId(uuid4()))

    @pytest.mark.asyncio
    async def test_anonymous_author_is_rejected(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question())

        with pytest.raises(UnauthenticatedError):
            await answer_service.submit_answer(None, question.id)
