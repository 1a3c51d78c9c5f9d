"""Unit tests for CastVoteUseCase."""

from uuid import uuid4

import pytest

from forum.adapter.pusher.client import PusherPublisher
from forum.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    GetAnswerScoreRequest,
    GetAnswerScoreUseCase,
)
from forum.domain.error import InvalidInputError, NotFoundError
from forum.domain.repository import AnswerRepository, UserRepository, VoteRepository
from forum.domain.value import NotificationStatus, VoteDirection, VoteOutcome
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


async def _seed(unit_env):
    user_repo = await unit_env.get(UserRepository)
    answer_repo = await unit_env.get(AnswerRepository)

    owner = await user_repo.save(make_user("owner@example.com"))
    voter = await user_repo.save(make_user("voter@example.com"))
    answer = await answer_repo.save(make_answer(make_question(owner), owner))
    return voter, answer


def _request(voter, answer, vote_type) -> CastVoteRequest:
    return CastVoteRequest(
        answer_id=str(answer.id), user_id=str(voter.id), type=vote_type
    )


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_upvote_returns_outcome_and_score(self, unit_env):
        """A first upvote is recorded and reflected in the score."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        voter, answer = await _seed(unit_env)

        # Act
        response = await use_case.execute(_request(voter, answer, "up"))

        # Assert
        assert response.success is True
        assert response.message == "Vote recorded successfully"
        assert response.outcome == VoteOutcome.CREATED
        assert response.direction == VoteDirection.UP
        assert (response.score.upvotes, response.score.score) == (1, 1)
        assert response.notification.status == NotificationStatus.SENT

    @pytest.mark.asyncio
    async def test_toggle_and_switch_messages(self, unit_env):
        """Switching and withdrawing report their own messages."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        voter, answer = await _seed(unit_env)
        await use_case.execute(_request(voter, answer, "up"))

        # Act
        switched = await use_case.execute(_request(voter, answer, "down"))
        removed = await use_case.execute(_request(voter, answer, "down"))

        # Assert
        assert switched.message == "Vote updated successfully"
        assert switched.score.score == -1
        assert removed.message == "Vote removed successfully"
        assert removed.direction is None
        assert removed.score.score == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("vote_type", ["sideways", "UP", None, 1, ""])
    async def test_invalid_type_is_rejected_without_writing(self, unit_env, vote_type):
        """Anything but exactly "up" or "down" leaves the ledger untouched."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        vote_repo = await unit_env.get(VoteRepository)
        publisher = await unit_env.get(PusherPublisher)
        voter, answer = await _seed(unit_env)

        # Act & Assert
        with pytest.raises(InvalidInputError, match="Invalid vote type"):
            await use_case.execute(_request(voter, answer, vote_type))

        assert await vote_repo.find_by_answer(answer.id) == []
        assert publisher.published == []

    @pytest.mark.asyncio
    async def test_malformed_answer_id_is_rejected(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)
        voter, _ = await _seed(unit_env)

        with pytest.raises(InvalidInputError, match="Invalid answer ID"):
            await use_case.execute(
                CastVoteRequest(answer_id="abc", user_id=str(voter.id), type="up")
            )

    @pytest.mark.asyncio
    async def test_unknown_answer_raises_not_found(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)
        voter, _ = await _seed(unit_env)

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(
                CastVoteRequest(
                    answer_id=str(uuid4()), user_id=str(voter.id), type="up"
                )
            )
        assert exc_info.value.resource == "Answer"

    @pytest.mark.asyncio
    async def test_failed_notification_still_succeeds(self, unit_env):
        """The vote response reports the failed push but the vote stands."""
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        publisher = await unit_env.get(PusherPublisher)
        publisher.fail_with = TimeoutError("slow")
        voter, answer = await _seed(unit_env)

        # Act
        response = await use_case.execute(_request(voter, answer, "up"))

        # Assert
        assert response.success is True
        assert response.score.upvotes == 1
        assert response.notification.status == NotificationStatus.FAILED


class TestGetAnswerScoreUseCase:
    """Tests for GetAnswerScoreUseCase."""

    @pytest.mark.asyncio
    async def test_score_of_answer_without_votes(self, unit_env):
        use_case = await unit_env.get(GetAnswerScoreUseCase)
        _, answer = await _seed(unit_env)

        score = await use_case.execute(GetAnswerScoreRequest(answer_id=str(answer.id)))

        assert (score.upvotes, score.downvotes, score.score) == (0, 0, 0)

    @pytest.mark.asyncio
    async def test_score_of_unknown_answer_raises_not_found(self, unit_env):
        use_case = await unit_env.get(GetAnswerScoreUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetAnswerScoreRequest(answer_id=str(uuid4())))
