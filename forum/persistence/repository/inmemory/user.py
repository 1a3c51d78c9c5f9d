"""In-memory user repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from forum.domain.model import User
from forum.domain.repository import UserRepository
from forum.domain.value import Email, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users."""
        return [self._users[uid] for uid in set(user_ids) if uid in self._users]

    async def save(self, user: User) -> User:
        """Insert a new user; emails are unique."""
        if await self.find_by_email(user.email):
            raise IntegrityError("Duplicate email", None, Exception())
        self._users[user.id] = user
        return user

    async def count(self) -> int:
        """Count all users."""
        return len(self._users)
