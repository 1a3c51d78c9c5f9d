"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from forum.domain.error import (
    EmailAlreadyRegisteredError,
    InvalidInputError,
    NotFoundError,
    UnauthenticatedError,
)
from forum.domain.repository import UserRepository
from forum.domain.service import UserService
from forum.domain.value import Email, UserId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestRegister:
    """Tests for register method."""

    @pytest.mark.asyncio
    async def test_register_hashes_password(self, unit_env):
        """The stored user should carry a bcrypt hash, never the password."""
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)

        # Act
        user = await user_service.register(
            Email("alice@example.com"), "Alice", "secret123"
        )

        # Assert
        saved = await user_repo.find_by_id(user.id)
        assert saved is not None
        assert saved.password_hash != "secret123"
        assert saved.password_hash.startswith("$2")

    @pytest.mark.asyncio
    async def test_duplicate_email_raises_conflict(self, unit_env):
        user_service = await unit_env.get(UserService)
        await user_service.register(Email("alice@example.com"), None, "secret123")

        with pytest.raises(EmailAlreadyRegisteredError):
            await user_service.register(Email("ALICE@example.com"), None, "other456")

    @pytest.mark.asyncio
    async def test_short_password_is_rejected(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(InvalidInputError, match="at least 6"):
            await user_service.register(Email("alice@example.com"), None, "abc")

    @pytest.mark.asyncio
    async def test_password_over_72_bytes_is_rejected(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)

        # Act
        with pytest.raises(InvalidInputError, match="at most 72 bytes"):
            await user_service.register(Email("alice@example.com"), None, "p" * 100)

        # Assert
        assert await user_repo.find_by_email(Email("alice@example.com")) is None

    @pytest.mark.asyncio
    async def test_multibyte_password_is_measured_in_bytes(self, unit_env):
        user_service = await unit_env.get(UserService)

        # 40 characters, 80 bytes
        with pytest.raises(InvalidInputError, match="at most 72 bytes"):
            await user_service.register(Email("alice@example.com"), None, "\u00e9" * 40)


class TestAuthenticate:
    """Tests for authenticate method."""

    @pytest.mark.asyncio
    async def test_correct_password_returns_user(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        registered = await user_service.register(
            Email("alice@example.com"), None, "secret123"
        )

        # Act
        user = await user_service.authenticate(Email("alice@example.com"), "secret123")

        # Assert
        assert user.id == registered.id

    @pytest.mark.asyncio
    async def test_wrong_password_is_rejected(self, unit_env):
        user_service = await unit_env.get(UserService)
        await user_service.register(Email("alice@example.com"), None, "secret123")

        with pytest.raises(UnauthenticatedError, match="Invalid email or password"):
            await user_service.authenticate(Email("alice@example.com"), "wrong-one")

    @pytest.mark.asyncio
    async def test_unknown_email_is_rejected(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(UnauthenticatedError):
            await user_service.authenticate(Email("nobody@example.com"), "secret123")


class TestGetById:
    """Tests for get_by_id method."""

    @pytest.mark.asyncio
    async def test_unknown_user_raises_not_found(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError, match="User not found"):
            await user_service.get_by_id(UserId(uuid4()))
