"""Unit tests for in-memory answer ordering and acceptance."""

from datetime import datetime, timedelta

import pytest

from ask.persistence.repository.inmemory import InMemoryAnswerRepository
from tests.factory import make_answer, make_question


class TestFindByQuestion:
    """Tests for find_by_question ordering."""

    @pytest.mark.asyncio
    async def test_accepted_first_then_votes_then_oldest(self):
        """Accepted answer leads, then higher score, then earlier answers."""
        # Arrange
        repo = InMemoryAnswerRepository()
        question = make_question()
        now = datetime.now()

        old_low = make_answer(question).model_copy(
            update={"votes": 1, "created_at": now - timedelta(hours=2)}
        )
        new_low = make_answer(question).model_copy(
            update={"votes": 1, "created_at": now}
        )
        high = make_answer(question).model_copy(
            update={"votes": 5, "created_at": now - timedelta(hours=1)}
        )
        accepted = make_answer(question).model_copy(
            update={"votes": -3, "created_at": now}
        )
        for answer in (new_low, high, accepted, old_low):
            await repo.save(answer)
        await repo.set_accepted(question.id, accepted.id)

        # Act
        answers = await repo.find_by_question(question.id)

        # Assert
        assert [a.id for a in answers] == [
            accepted.id,
            high.id,
            old_low.id,
            new_low.id,
        ]

    @pytest.mark.asyncio
    async def test_other_questions_are_excluded(self):
        repo = InMemoryAnswerRepository()
        question = make_question()
        other = make_question()
        mine = await repo.save(make_answer(question))
        await repo.save(make_answer(other))

        answers = await repo.find_by_question(question.id)

        assert [a.id for a in answers] == [mine.id]


class TestSetAccepted:
    @pytest.mark.asyncio
    async def test_set_accepted_only_touches_its_question(self):
        """Accepting on one question leaves other questions' answers alone."""
        # Arrange
        repo = InMemoryAnswerRepository()
        question = make_question()
        other = make_question()
        answer = await repo.save(make_answer(question))
        other_answer = await repo.save(make_answer(other))
        await repo.set_accepted(other.id, other_answer.id)

        # Act
        await repo.set_accepted(question.id, answer.id)

        # Assert
        assert (await repo.find_accepted(question.id)).id == answer.id
        assert (await repo.find_accepted(other.id)).id == other_answer.id
