"""PostgreSQL implementation of Tag repository."""

from typing import Optional, Sequence

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model.tag import Tag
from forum.domain.repository.tag import TagRepository
from forum.domain.value import TagName
from forum.persistence.mappers import row_to_tag, tag_to_dict
from forum.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def save(self, tag: Tag) -> Tag:
        """Insert a new tag."""
        stmt = insert(tags_table).values(**tag_to_dict(tag))
        await self.session.execute(stmt)
        await self.session.flush()
        return tag

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name."""
        stmt = select(tags_table).where(tags_table.c.name == name.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_by_names(self, names: Sequence[TagName]) -> list[Tag]:
        """Find multiple tags by names in a single query."""
        if not names:
            return []

        stmt = select(tags_table).where(
            tags_table.c.name.in_([name.root for name in names])
        )
        result = await self.session.execute(stmt)
        rows = result.fetchall()
        return [row_to_tag(row._asdict()) for row in rows]

    async def find_all(self, limit: int = 100) -> list[Tag]:
        """Find all tags ordered by name."""
        stmt = select(tags_table).order_by(tags_table.c.name).limit(limit)
        result = await self.session.execute(stmt)
        rows = result.fetchall()
        return [row_to_tag(row._asdict()) for row in rows]

    async def count(self) -> int:
        """Count all tags."""
        result = await self.session.execute(
            select(func.count()).select_from(tags_table)
        )
        return result.scalar_one()
