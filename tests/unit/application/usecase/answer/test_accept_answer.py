"""Unit tests for AcceptAnswerUseCase."""

from uuid import uuid4

import pytest

from ask.application.usecase.answer import AcceptAnswerRequest, AcceptAnswerUseCase
from ask.domain.error import NotQuestionOwnerError
from ask.domain.repository import AnswerRepository, QuestionRepository
from ask.domain.value import UserId
from tests.factory import make_answer, make_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestAcceptAnswerUseCase:
    """Tests for AcceptAnswerUseCase."""

    @pytest.mark.asyncio
    async def test_accept_then_replace(self, unit_env):
        # Arrange
        use_case = await unit_env.get(AcceptAnswerUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        owner_id = UserId(uuid4())
        question = await question_repo.save(make_question(owner_id))
        a1 = await answer_repo.save(make_answer(question))
        a2 = await answer_repo.save(make_answer(question))

        # Act
        first = await use_case.execute(
            AcceptAnswerRequest(
                question_id=str(question.id),
                answer_id=str(a1.id),
                user_id=str(owner_id),
            )
        )
        second = await use_case.execute(
            AcceptAnswerRequest(
                question_id=str(question.id),
                answer_id=str(a2.id),
                user_id=str(owner_id),
            )
        )

        # Assert
        assert first.changed is True
        assert first.previous_answer_id is None
        assert second.changed is True
        assert second.previous_answer_id == str(a1.id)

    @pytest.mark.asyncio
    async def test_non_owner_raises_error(self, unit_env):
        use_case = await unit_env.get(AcceptAnswerUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        question = await question_repo.save(make_question())
        answer = await answer_repo.save(make_answer(question))

        with pytest.raises(NotQuestionOwnerError):
            await use_case.execute(
                AcceptAnswerRequest(
                    question_id=str(question.id),
                    answer_id=str(answer.id),
                    user_id=str(uuid4()),
                )
            )
