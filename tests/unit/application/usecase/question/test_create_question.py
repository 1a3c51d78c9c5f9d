"""Unit tests for CreateQuestionUseCase and ListQuestionsUseCase."""

import pytest

from forum.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsUseCase,
)
from forum.application.usecase.tag import ListTagsRequest, ListTagsUseCase
from forum.domain.error import InvalidInputError
from forum.domain.repository import UserRepository
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreateQuestionUseCase:
    """Tests for CreateQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_create_question_with_tags(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateQuestionUseCase)
        list_tags = await unit_env.get(ListTagsUseCase)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())

        # Act
        response = await use_case.execute(
            CreateQuestionRequest(
                title="Threading in asyncio?",
                description="Details",
                tags=["python", " asyncio "],
                author_id=str(author.id),
            )
        )

        # Assert
        assert response.tags == ["python", "asyncio"]
        tags = await list_tags.execute(ListTagsRequest())
        assert [t.name for t in tags.tags] == ["asyncio", "python"]

    @pytest.mark.asyncio
    async def test_overlong_tag_is_rejected(self, unit_env):
        use_case = await unit_env.get(CreateQuestionUseCase)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())

        with pytest.raises(InvalidInputError, match="Tag names"):
            await use_case.execute(
                CreateQuestionRequest(
                    title="Title",
                    description="Body",
                    tags=["x" * 51],
                    author_id=str(author.id),
                )
            )


class TestListQuestionsUseCase:
    """Tests for ListQuestionsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_created_questions(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateQuestionUseCase)
        list_questions = await unit_env.get(ListQuestionsUseCase)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())
        for i in range(3):
            await create.execute(
                CreateQuestionRequest(
                    title=f"Q{i}", description="Body", author_id=str(author.id)
                )
            )

        # Act
        response = await list_questions.execute(ListQuestionsRequest(page=1, limit=2))

        # Assert
        assert len(response.questions) == 2
        assert response.total == 3
        assert response.total_pages == 2
