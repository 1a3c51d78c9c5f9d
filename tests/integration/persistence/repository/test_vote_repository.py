"""Integration tests for VoteRepository.

These run against the in-memory repositories by default; pass
unmock={"persistence"} to create_env_fixture to run them against
Postgres (assumes a migrated database is running).
"""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from forum.domain.model import Vote
from forum.domain.repository import VoteRepository
from forum.domain.value import AnswerId, UserId, VoteDirection
from tests.harness import create_env_fixture

# Integration test fixture
integration_env = create_env_fixture()


class TestVoteRepositoryIntegration:
    """Integration tests for the (user, answer) vote key."""

    @pytest.mark.asyncio
    async def test_second_insert_for_same_pair_is_rejected(self, integration_env):
        """The pair is the key: a second insert must fail, not duplicate."""
        # Arrange
        vote_repo = await integration_env.get(VoteRepository)
        user_id, answer_id = UserId(uuid4()), AnswerId(uuid4())
        await vote_repo.save(
            Vote(user_id=user_id, answer_id=answer_id, direction=VoteDirection.UP)
        )

        # Act & Assert
        with pytest.raises(IntegrityError):
            await vote_repo.save(
                Vote(user_id=user_id, answer_id=answer_id, direction=VoteDirection.DOWN)
            )

    @pytest.mark.asyncio
    async def test_update_and_delete_report_missing_rows(self, integration_env):
        """Updating or deleting a vote that isn't there reports it."""
        # Arrange
        vote_repo = await integration_env.get(VoteRepository)
        user_id, answer_id = UserId(uuid4()), AnswerId(uuid4())

        # Act
        updated = await vote_repo.update_direction(
            user_id, answer_id, VoteDirection.DOWN
        )
        deleted = await vote_repo.delete(user_id, answer_id)

        # Assert
        assert updated is None
        assert deleted is False

    @pytest.mark.asyncio
    async def test_update_direction_flips_vote(self, integration_env):
        # Arrange
        vote_repo = await integration_env.get(VoteRepository)
        user_id, answer_id = UserId(uuid4()), AnswerId(uuid4())
        await vote_repo.save(
            Vote(user_id=user_id, answer_id=answer_id, direction=VoteDirection.UP)
        )

        # Act
        updated = await vote_repo.update_direction(
            user_id, answer_id, VoteDirection.DOWN
        )

        # Assert
        assert updated.direction == VoteDirection.DOWN
        votes = await vote_repo.find_by_answers([answer_id])
        assert [v.direction for v in votes] == [VoteDirection.DOWN]
