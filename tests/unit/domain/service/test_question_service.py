"""Unit tests for QuestionService."""

from uuid import uuid4

import pytest

from ask.domain.error import NotFoundError, UnauthenticatedError
from ask.domain.service import QuestionService
from ask.domain.value import QuestionId, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestQuestionService:
    """Tests for question registration and lookup."""

    @pytest.mark.asyncio
    async def test_register_question_starts_with_zero_counters(self, unit_env):
        # Arrange
        question_service = await unit_env.get(QuestionService)
        author_id = UserId(uuid4())

        # Act
        question = await question_service.register_question(author_id)

        # Assert
        assert question.author_id == author_id
        assert question.votes == 0
        assert question.view_count == 0
        assert await question_service.get_question(question.id) == question

    @pytest.mark.asyncio
    async def test_register_without_author_raises_error(self, unit_env):
        question_service = await unit_env.get(QuestionService)

        with pytest.raises(UnauthenticatedError):
            await question_service.register_question(None)

    @pytest.mark.asyncio
    async def test_get_unknown_question_raises_not_found(self, unit_env):
        question_service = await unit_env.get(QuestionService)

        with pytest.raises(NotFoundError):
            await question_service.get_question(QuestionId(uuid4()))
