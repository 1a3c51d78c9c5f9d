"""PostgreSQL implementation of User repository."""

from typing import Optional, Sequence

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import User
from forum.domain.repository import UserRepository
from forum.domain.value import Email, UserId
from forum.persistence.mappers import row_to_user, user_to_dict
from forum.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email."""
        stmt = select(users_table).where(users_table.c.email == email.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users in one query."""
        if not user_ids:
            return []

        stmt = select(users_table).where(users_table.c.id.in_(list(user_ids)))
        result = await self.session.execute(stmt)
        return [row_to_user(row._asdict()) for row in result.fetchall()]

    async def save(self, user: User) -> User:
        """Insert a new user."""
        stmt = insert(users_table).values(**user_to_dict(user))
        await self.session.execute(stmt)
        await self.session.flush()
        return user

    async def count(self) -> int:
        """Count all users."""
        result = await self.session.execute(
            select(func.count()).select_from(users_table)
        )
        return result.scalar_one()
