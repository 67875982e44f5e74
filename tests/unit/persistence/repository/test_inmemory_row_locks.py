"""Unit tests for in-memory row locking."""

import asyncio

import pytest

from ask.domain.value import Target, UserId, VoteDirection, VoteOutcome
from ask.persistence.repository.inmemory import (
    InMemoryQuestionRepository,
    InMemoryTransactionManager,
    InMemoryVoteRepository,
)
from tests.factory import make_question


class TestQuestionRowLock:
    """lock_by_id behaves like SELECT ... FOR UPDATE."""

    @pytest.mark.asyncio
    async def test_lock_is_held_until_transaction_ends(self):
        # Arrange
        repo = InMemoryQuestionRepository()
        transaction_manager = InMemoryTransactionManager()
        question = await repo.save(make_question())
        order: list[str] = []

        async def first() -> None:
            async with transaction_manager.transaction():
                await repo.lock_by_id(question.id)
                order.append("first locked")
                for _ in range(3):
                    await asyncio.sleep(0)
                order.append("first committed")

        async def second() -> None:
            await asyncio.sleep(0)
            async with transaction_manager.transaction():
                await repo.lock_by_id(question.id)
                order.append("second locked")

        # Act
        await asyncio.gather(first(), second())

        # Assert
        assert order == ["first locked", "first committed", "second locked"]

    @pytest.mark.asyncio
    async def test_rollback_releases_lock(self):
        # Arrange
        repo = InMemoryQuestionRepository()
        transaction_manager = InMemoryTransactionManager()
        question = await repo.save(make_question())

        with pytest.raises(RuntimeError):
            async with transaction_manager.transaction():
                await repo.lock_by_id(question.id)
                raise RuntimeError("boom")

        # Act
        async with transaction_manager.transaction():
            locked = await asyncio.wait_for(repo.lock_by_id(question.id), timeout=1)

        # Assert
        assert locked == question
        assert transaction_manager.rollbacks == 1

    @pytest.mark.asyncio
    async def test_relocking_inside_one_transaction_does_not_block(self):
        repo = InMemoryQuestionRepository()
        transaction_manager = InMemoryTransactionManager()
        question = await repo.save(make_question())

        async with transaction_manager.transaction():
            await repo.lock_by_id(question.id)
            again = await asyncio.wait_for(repo.lock_by_id(question.id), timeout=1)

        assert again == question


class TestVotePairLock:
    @pytest.mark.asyncio
    async def test_concurrent_first_casts_create_then_retract(self):
        """Two racing identical casts must not both see an empty pair."""
        # Arrange
        repo = InMemoryVoteRepository()
        transaction_manager = InMemoryTransactionManager()
        question = make_question()
        target = Target.question(question.id)
        voter_id = UserId(question.author_id)

        async def cast() -> VoteOutcome:
            async with transaction_manager.transaction():
                return await repo.cast(voter_id, target, VoteDirection.UP)

        # Act
        outcomes = await asyncio.gather(cast(), cast())

        # Assert
        assert sorted(outcomes) == sorted(
            [VoteOutcome.CREATED, VoteOutcome.RETRACTED]
        )
        assert await repo.tally(target) == 0
