"""PostgreSQL implementation of Question repository."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ask.domain.model import Question
from ask.domain.repository import QuestionRepository
from ask.domain.value import QuestionId
from ask.persistence.mappers import question_to_dict, row_to_question
from ask.persistence.tables import questions_table


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        stmt = select(questions_table).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_question(row._asdict()) if row else None

    async def lock_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID with SELECT ... FOR UPDATE."""
        stmt = (
            select(questions_table)
            .where(questions_table.c.id == question_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_question(row._asdict()) if row else None

    async def save(self, question: Question) -> Question:
        """Save a question (create)."""
        stmt = insert(questions_table).values(**question_to_dict(question))
        await self.session.execute(stmt)
        await self.session.flush()
        return question

    async def adjust_votes(self, question_id: QuestionId, delta: int) -> None:
        """Atomically add delta to the cached vote counter."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(votes=questions_table.c.votes + delta)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_view_count(self, question_id: QuestionId) -> Optional[int]:
        """Atomically increment the view count by 1."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(view_count=questions_table.c.view_count + 1)
            .returning(questions_table.c.view_count)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
