"""Unit tests for GetQuestionUseCase."""

from uuid import uuid4

import pytest

from forum.application.usecase.question import GetQuestionRequest, GetQuestionUseCase
from forum.domain.error import InvalidInputError, NotFoundError
from forum.domain.repository import AnswerRepository, QuestionRepository, UserRepository
from forum.domain.service import VoteService
from forum.domain.value import VoteDirection
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestGetQuestionUseCase:
    """Tests for GetQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_returns_threaded_answers_with_votes(self, unit_env):
        """Answers come back in thread order with totals and the viewer's vote."""
        # Arrange
        use_case = await unit_env.get(GetQuestionUseCase)
        vote_service = await unit_env.get(VoteService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        alice = await user_repo.save(make_user("alice@example.com", "Alice"))
        bob = await user_repo.save(make_user("bob@example.com"))
        question = await question_repo.save(make_question(alice, tags=["python"]))
        root = await answer_repo.save(make_answer(question, bob, minutes=0))
        reply = await answer_repo.save(
            make_answer(question, alice, parent=root, minutes=1)
        )
        await vote_service.cast_vote(alice, root.id, VoteDirection.UP)
        await vote_service.cast_vote(bob, reply.id, VoteDirection.DOWN)

        # Act
        response = await use_case.execute(
            GetQuestionRequest(question_id=str(question.id), viewer_id=str(alice.id))
        )

        # Assert
        assert response.tags == ["python"]
        assert response.author.name == "Alice"
        assert len(response.answers) == 2
        top, child = response.answers
        assert top.id == str(root.id)
        assert top.author.name == "bob@example.com"
        assert (top.upvotes, top.score, top.user_vote) == (1, 1, VoteDirection.UP)
        assert (top.depth, top.parent_id) == (0, None)
        assert top.reply_ids == [str(reply.id)]
        assert (child.depth, child.parent_id) == (1, str(root.id))
        assert child.score == -1
        assert child.user_vote is None

    @pytest.mark.asyncio
    async def test_anonymous_viewer_has_no_user_vote(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetQuestionUseCase)
        vote_service = await unit_env.get(VoteService)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        alice = await user_repo.save(make_user("alice@example.com"))
        question = await question_repo.save(make_question(alice))
        answer = await answer_repo.save(make_answer(question, alice))
        await vote_service.cast_vote(alice, answer.id, VoteDirection.UP)

        # Act
        response = await use_case.execute(
            GetQuestionRequest(question_id=str(question.id))
        )

        # Assert
        assert response.answers[0].upvotes == 1
        assert response.answers[0].user_vote is None

    @pytest.mark.asyncio
    async def test_question_without_answers(self, unit_env):
        use_case = await unit_env.get(GetQuestionUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        alice = await user_repo.save(make_user())
        question = await question_repo.save(make_question(alice))

        response = await use_case.execute(
            GetQuestionRequest(question_id=str(question.id))
        )

        assert response.answers == []

    @pytest.mark.asyncio
    async def test_unknown_question_raises_not_found(self, unit_env):
        use_case = await unit_env.get(GetQuestionUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetQuestionRequest(question_id=str(uuid4())))

    @pytest.mark.asyncio
    async def test_malformed_question_id_is_rejected(self, unit_env):
        use_case = await unit_env.get(GetQuestionUseCase)

        with pytest.raises(InvalidInputError, match="Invalid question ID"):
            await use_case.execute(GetQuestionRequest(question_id="42"))

    @pytest.mark.asyncio
    async def test_answers_are_flattened_in_thread_order(self, unit_env):
        """Each top-level answer is followed by its replies, depth-first."""
        # Arrange
        use_case = await unit_env.get(GetQuestionUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        alice = await user_repo.save(make_user())
        question = await question_repo.save(make_question(alice))
        first = await answer_repo.save(make_answer(question, alice, minutes=0))
        second = await answer_repo.save(make_answer(question, alice, minutes=1))
        child = await answer_repo.save(
            make_answer(question, alice, parent=first, minutes=2)
        )
        grandchild = await answer_repo.save(
            make_answer(question, alice, parent=child, minutes=3)
        )
        other_child = await answer_repo.save(
            make_answer(question, alice, parent=second, minutes=4)
        )

        # Act
        response = await use_case.execute(
            GetQuestionRequest(question_id=str(question.id))
        )

        # Assert
        assert [(a.id, a.depth) for a in response.answers] == [
            (str(second.id), 0),
            (str(other_child.id), 1),
            (str(first.id), 0),
            (str(child.id), 1),
            (str(grandchild.id), 2),
        ]
        assert response.answers[0].reply_ids == [str(other_child.id)]
        assert response.answers[4].reply_ids == []
