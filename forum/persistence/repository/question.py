"""PostgreSQL implementation of Question repository."""

from collections import defaultdict
from typing import Optional
from uuid import UUID

import logfire
from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Question
from forum.domain.repository import QuestionRepository
from forum.domain.value import QuestionId
from forum.persistence.mappers import question_to_dict, row_to_question
from forum.persistence.tables import question_tags_table, questions_table, tags_table


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_tags_for_questions(
        self, question_ids: list[UUID]
    ) -> dict[UUID, list[str]]:
        """Fetch tags for multiple questions in a single query.

        Args:
            question_ids: List of question IDs

        Returns:
            Dict mapping question_id -> list of tag names
        """
        if not question_ids:
            return {}

        stmt = (
            select(question_tags_table.c.question_id, tags_table.c.name)
            .select_from(question_tags_table)
            .join(tags_table, question_tags_table.c.tag_id == tags_table.c.id)
            .where(question_tags_table.c.question_id.in_(question_ids))
            .order_by(tags_table.c.name)
        )
        result = await self.session.execute(stmt)

        tag_map: dict[UUID, list[str]] = defaultdict(list)
        for row in result.fetchall():
            tag_map[row.question_id].append(row.name)

        return tag_map

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        with logfire.span(
            "question_repository.find_by_id", question_id=str(question_id)
        ):
            stmt = select(questions_table).where(questions_table.c.id == question_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                return None

            tag_map = await self._fetch_tags_for_questions([question_id])
            return row_to_question(row._asdict(), tag_map.get(question_id, []))

    async def list_recent(self, limit: int, offset: int) -> list[Question]:
        """List questions newest first."""
        with logfire.span("question_repository.list_recent", limit=limit, offset=offset):
            stmt = (
                select(questions_table)
                .order_by(questions_table.c.created_at.desc())
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            rows = result.fetchall()

            tag_map = await self._fetch_tags_for_questions([row.id for row in rows])
            return [
                row_to_question(row._asdict(), tag_map.get(row.id, [])) for row in rows
            ]

    async def count(self) -> int:
        """Count all questions."""
        result = await self.session.execute(
            select(func.count()).select_from(questions_table)
        )
        return result.scalar_one()

    async def save(self, question: Question) -> Question:
        """Insert a question and link its tags."""
        with logfire.span(
            "question_repository.save",
            question_id=str(question.id),
            tags=[t.root for t in question.tag_names],
        ):
            stmt = insert(questions_table).values(**question_to_dict(question))
            await self.session.execute(stmt)

            if question.tag_names:
                # Look up tag IDs from tag names
                tag_lookup_stmt = select(tags_table.c.id, tags_table.c.name).where(
                    tags_table.c.name.in_([tag.root for tag in question.tag_names])
                )
                tag_result = await self.session.execute(tag_lookup_stmt)
                tag_id_map = {row.name: row.id for row in tag_result.fetchall()}

                links = [
                    {"question_id": question.id, "tag_id": tag_id_map[name.root]}
                    for name in question.tag_names
                    if name.root in tag_id_map
                ]
                if links:
                    await self.session.execute(insert(question_tags_table), links)

            await self.session.flush()
            return question
