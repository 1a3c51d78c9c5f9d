"""PostgreSQL implementation of Vote repository."""

from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Vote
from forum.domain.repository import VoteRepository
from forum.domain.value import AnswerId, UserId, VoteDirection
from forum.persistence.mappers import row_to_vote, vote_to_dict
from forum.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _pair(user_id: UserId, answer_id: AnswerId):
        return and_(
            votes_table.c.user_id == user_id,
            votes_table.c.answer_id == answer_id,
        )

    async def find(self, user_id: UserId, answer_id: AnswerId) -> Optional[Vote]:
        """Find a user's vote on an answer."""
        stmt = select(votes_table).where(self._pair(user_id, answer_id))
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote; the primary key rejects a second vote on the pair."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def update_direction(
        self, user_id: UserId, answer_id: AnswerId, direction: VoteDirection
    ) -> Optional[Vote]:
        """Flip an existing vote."""
        stmt = (
            update(votes_table)
            .where(self._pair(user_id, answer_id))
            .values(direction=direction.value, updated_at=datetime.now())
            .returning(*votes_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_vote(row._asdict()) if row else None

    async def delete(self, user_id: UserId, answer_id: AnswerId) -> bool:
        """Delete a user's vote on an answer."""
        stmt = delete(votes_table).where(self._pair(user_id, answer_id))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def find_by_answer(self, answer_id: AnswerId) -> list[Vote]:
        """Find all votes on an answer."""
        stmt = select(votes_table).where(votes_table.c.answer_id == answer_id)
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def find_by_answers(self, answer_ids: Sequence[AnswerId]) -> list[Vote]:
        """Find all votes on several answers (batch query)."""
        if not answer_ids:
            return []

        stmt = select(votes_table).where(votes_table.c.answer_id.in_(list(answer_ids)))
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]
