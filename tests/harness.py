"""Fixture factory shared by unit, integration and e2e tests."""

import pytest_asyncio

from forum.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Create a fixture yielding a request-scoped container.

    Each test gets a fresh container, so in-memory state never leaks
    between tests.

    Usage:
        unit_env = create_env_fixture()
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_cast_vote(unit_env):
            vote_service = await unit_env.get(VoteService)
    """

    @pytest_asyncio.fixture
    async def _env():
        container = build_test_container(unmock=unmock)
        async with container() as request_container:
            yield request_container
        await container.close()

    return _env
