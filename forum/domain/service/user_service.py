"""User domain service."""

from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from forum.domain.error import (
    EmailAlreadyRegisteredError,
    InvalidInputError,
    NotFoundError,
    UnauthenticatedError,
)
from forum.domain.model import User
from forum.domain.repository import UserRepository
from forum.domain.value import Email, UserId
from forum.util.password import hash_password, verify_password

from .base import Service

MIN_PASSWORD_LENGTH = 6
# bcrypt only accepts this many bytes of input
MAX_PASSWORD_BYTES = 72


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_user_by_email(self, email: Email) -> User | None:
        """Get user by email.

        Args:
            email: User email

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_email"):
            return await self.user_repository.find_by_email(email)

    async def get_users_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Load several users at once.

        Args:
            user_ids: IDs to load (duplicates allowed)

        Returns:
            Mapping of ID to user for the users that exist
        """
        if not user_ids:
            return {}
        users = await self.user_repository.find_by_ids(list(set(user_ids)))
        return {user.id: user for user in users}

    async def register(self, email: Email, name: str | None, password: str) -> User:
        """Create an account with email and password.

        Args:
            email: Account email
            name: Optional display name
            password: Plain-text password

        Returns:
            The new user

        Raises:
            InvalidInputError: If the password is too short or too long
            EmailAlreadyRegisteredError: If the email is taken
        """
        with logfire.span("user_service.register"):
            if len(password) < MIN_PASSWORD_LENGTH:
                raise InvalidInputError(
                    f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
                )
            if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
                raise InvalidInputError(
                    f"Password must be at most {MAX_PASSWORD_BYTES} bytes"
                )

            if await self.user_repository.find_by_email(email):
                logfire.warn("Signup with existing email")
                raise EmailAlreadyRegisteredError(email.root)

            now = datetime.now()
            user = User(
                id=UserId(uuid4()),
                email=email,
                name=name.strip() if name and name.strip() else None,
                password_hash=hash_password(password),
                created_at=now,
                updated_at=now,
            )

            try:
                saved = await self.user_repository.save(user)
            except IntegrityError:
                # Lost a race with a concurrent signup
                raise EmailAlreadyRegisteredError(email.root)

            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def authenticate(self, email: Email, password: str) -> User:
        """Check credentials and return the matching user.

        Args:
            email: Account email
            password: Plain-text password

        Returns:
            The authenticated user

        Raises:
            UnauthenticatedError: If the email is unknown or the password is wrong
        """
        with logfire.span("user_service.authenticate"):
            user = await self.user_repository.find_by_email(email)
            if (
                not user
                or not user.password_hash
                or not verify_password(password, user.password_hash)
            ):
                logfire.warn("Invalid sign-in attempt")
                raise UnauthenticatedError("Invalid email or password")

            logfire.info("User authenticated", user_id=str(user.id))
            return user
