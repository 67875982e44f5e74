"""Integration tests for concurrent writes against PostgreSQL.

Requires a migrated database at DATABASE__URL. Run with `pytest -m integration`.
Every concurrent call gets its own request container, and with it its own
session and connection, so the row locks are really contended.
"""

import asyncio
from uuid import uuid4

import pytest
import pytest_asyncio

from ask.domain.repository import AnswerRepository
from ask.domain.service import (
    AcceptanceService,
    AnswerService,
    QuestionService,
    TallyService,
    ViewCounterService,
    VoteService,
)
from ask.domain.value import Target, UserId, VoteDirection
from tests.di import build_test_container

pytestmark = pytest.mark.integration


@pytest_asyncio.fixture
async def container():
    container = build_test_container(unmock={"persistence"})
    yield container
    await container.close()


async def _call(container, service_type, method: str, *args):
    async with container() as request_container:
        service = await request_container.get(service_type)
        return await getattr(service, method)(*args)


class TestConcurrentVotes:
    """Concurrent casts on the PostgreSQL vote ledger."""

    @pytest.mark.asyncio
    async def test_alternating_casts_by_one_voter(self, container):
        """Casts from one voter serialize: deltas add up, one row at most."""
        # Arrange
        question = await _call(
            container, QuestionService, "register_question", UserId(uuid4())
        )
        voter_id = UserId(uuid4())
        target = Target.question(question.id)
        directions = [
            VoteDirection.UP if i % 2 == 0 else VoteDirection.DOWN for i in range(10)
        ]

        # Act
        results = await asyncio.gather(
            *(
                _call(container, VoteService, "cast_vote", voter_id, target, d)
                for d in directions
            )
        )

        # Assert
        final_tally = await _call(container, TallyService, "get_tally", target)
        assert sum(r.delta for r in results) == final_tally
        assert final_tally in (-1, 0, 1)

        stored = await _call(container, QuestionService, "get_question", question.id)
        assert stored.votes == final_tally

    @pytest.mark.asyncio
    async def test_many_voters_on_one_answer(self, container):
        # Arrange
        owner_id = UserId(uuid4())
        question = await _call(container, QuestionService, "register_question", owner_id)
        answer = await _call(
            container, AnswerService, "submit_answer", UserId(uuid4()), question.id
        )
        target = Target.answer(answer.id)

        # Act
        await asyncio.gather(
            *(
                _call(
                    container, VoteService, "cast_vote", UserId(uuid4()), target, d
                )
                for d in [VoteDirection.UP] * 8 + [VoteDirection.DOWN] * 3
            )
        )

        # Assert
        state = await _call(container, TallyService, "get_answer_state", answer.id)
        assert state.tally == 5


class TestConcurrentViews:
    @pytest.mark.asyncio
    async def test_k_concurrent_views(self, container):
        """K concurrent views raise view_count by exactly K."""
        question = await _call(
            container, QuestionService, "register_question", UserId(uuid4())
        )

        await asyncio.gather(
            *(
                _call(container, ViewCounterService, "record_view", question.id)
                for _ in range(20)
            )
        )

        stored = await _call(container, QuestionService, "get_question", question.id)
        assert stored.view_count == 20


class TestConcurrentAcceptance:
    @pytest.mark.asyncio
    async def test_racing_accepts_leave_exactly_one(self, container):
        """Racing accepts of two answers never end with both or neither."""
        # Arrange
        owner_id = UserId(uuid4())
        question = await _call(container, QuestionService, "register_question", owner_id)
        a1 = await _call(
            container, AnswerService, "submit_answer", UserId(uuid4()), question.id
        )
        a2 = await _call(
            container, AnswerService, "submit_answer", UserId(uuid4()), question.id
        )

        # Act
        await asyncio.gather(
            *(
                _call(
                    container,
                    AcceptanceService,
                    "accept_answer",
                    owner_id,
                    question.id,
                    answer.id,
                )
                for answer in (a1, a2, a1, a2)
            )
        )

        # Assert
        async with container() as request_container:
            answer_repo = await request_container.get(AnswerRepository)
            answers = await answer_repo.find_by_question(question.id)
        assert sum(1 for a in answers if a.is_accepted) == 1
