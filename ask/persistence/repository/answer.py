"""PostgreSQL implementation of Answer repository."""

from typing import List, Optional

from sqlalchemy import and_, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ask.domain.model import Answer
from ask.domain.repository import AnswerRepository
from ask.domain.value import AnswerId, QuestionId
from ask.persistence.mappers import answer_to_dict, row_to_answer
from ask.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find all answers to a question."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.question_id == question_id)
            .order_by(
                answers_table.c.is_accepted.desc(),
                answers_table.c.votes.desc(),
                answers_table.c.created_at.asc(),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def find_accepted(self, question_id: QuestionId) -> Optional[Answer]:
        """Find the accepted answer of a question."""
        stmt = select(answers_table).where(
            and_(
                answers_table.c.question_id == question_id,
                answers_table.c.is_accepted.is_(True),
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create)."""
        stmt = insert(answers_table).values(**answer_to_dict(answer))
        await self.session.execute(stmt)
        await self.session.flush()
        return answer

    async def adjust_votes(self, answer_id: AnswerId, delta: int) -> None:
        """Atomically add delta to the cached vote counter."""
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .values(votes=answers_table.c.votes + delta)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def set_accepted(self, question_id: QuestionId, answer_id: AnswerId) -> None:
        """Clear the current accepted answer, then accept answer_id.

        Both statements run in the caller's transaction, which holds the
        question's row lock, so other readers only ever see the committed
        before or after state. Clearing first keeps the partial unique
        index on accepted answers satisfied at every statement.
        """
        clear_stmt = (
            update(answers_table)
            .where(answers_table.c.question_id == question_id)
            .where(answers_table.c.is_accepted.is_(True))
            .where(answers_table.c.id != answer_id)
            .values(is_accepted=False)
        )
        set_stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .where(answers_table.c.question_id == question_id)
            .values(is_accepted=True)
        )
        await self.session.execute(clear_stmt)
        await self.session.execute(set_stmt)
        await self.session.flush()
