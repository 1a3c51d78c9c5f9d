"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from forum.domain.model.user import User
from forum.domain.value import Email, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email.

        Args:
            email: The user's email

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users in one query.

        Args:
            user_ids: IDs to look up (duplicates allowed)

        Returns:
            Users that exist, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a new user.

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            IntegrityError: If the email is already taken
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all users."""
        pass
