"""PostgreSQL implementation of Answer repository."""

from typing import Optional

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Answer
from forum.domain.repository import AnswerRepository
from forum.domain.value import AnswerId, AnswerOwner, QuestionId
from forum.persistence.mappers import answer_to_dict, row_to_answer, row_to_answer_owner
from forum.persistence.tables import answers_table, users_table


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

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find every answer on a question ordered by creation time."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.question_id == question_id)
            .order_by(answers_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def find_owner(self, answer_id: AnswerId) -> Optional[AnswerOwner]:
        """Resolve an answer's author and question in one query."""
        stmt = (
            select(
                answers_table.c.author_id,
                answers_table.c.question_id,
                users_table.c.email,
            )
            .select_from(answers_table)
            .join(users_table, answers_table.c.author_id == users_table.c.id)
            .where(answers_table.c.id == answer_id)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer_owner(row._asdict()) if row else None

    async def save(self, answer: Answer) -> Answer:
        """Insert a new answer."""
        stmt = insert(answers_table).values(**answer_to_dict(answer))
        await self.session.execute(stmt)
        await self.session.flush()
        return answer

    async def count(self) -> int:
        """Count all answers."""
        result = await self.session.execute(
            select(func.count()).select_from(answers_table)
        )
        return result.scalar_one()
