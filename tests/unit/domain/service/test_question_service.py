"""Unit tests for QuestionService and TagService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from forum.domain.error import InvalidInputError, NotFoundError
from forum.domain.repository import QuestionRepository, TagRepository
from forum.domain.service import QuestionService, TagService
from forum.domain.value import QuestionId, TagName
from tests.conftest import make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreateQuestion:
    """Tests for create_question method."""

    @pytest.mark.asyncio
    async def test_creates_question_and_missing_tags(self, unit_env):
        """New tag names are created, known ones are reused."""
        # Arrange
        question_service = await unit_env.get(QuestionService)
        tag_service = await unit_env.get(TagService)
        tag_repo = await unit_env.get(TagRepository)
        existing = (await tag_service.get_or_create_tags([TagName("python")]))[0]
        author = make_user()

        # Act
        question = await question_service.create_question(
            author,
            "  Async fixtures?  ",
            "How do they work?",
            [TagName("python"), TagName("pytest"), TagName("python")],
        )

        # Assert
        assert question.title == "Async fixtures?"
        assert [t.root for t in question.tag_names] == ["python", "pytest"]
        assert await tag_repo.count() == 2
        assert await tag_repo.find_by_name(TagName("python")) == existing

    @pytest.mark.asyncio
    async def test_blank_title_is_rejected(self, unit_env):
        question_service = await unit_env.get(QuestionService)

        with pytest.raises(InvalidInputError, match="Title is required"):
            await question_service.create_question(make_user(), " ", "Body", [])

    @pytest.mark.asyncio
    async def test_blank_description_is_rejected(self, unit_env):
        question_service = await unit_env.get(QuestionService)

        with pytest.raises(InvalidInputError, match="Description is required"):
            await question_service.create_question(make_user(), "Title", "", [])

    @pytest.mark.asyncio
    async def test_overlong_title_is_rejected_before_tags_are_created(self, unit_env):
        # Arrange
        question_service = await unit_env.get(QuestionService)
        tag_repo = await unit_env.get(TagRepository)

        # Act
        with pytest.raises(InvalidInputError, match="at most 300"):
            await question_service.create_question(
                make_user(), "t" * 301, "Body", [TagName("python")]
            )

        # Assert
        assert await tag_repo.find_by_names([TagName("python")]) == []

    @pytest.mark.asyncio
    async def test_overlong_description_is_rejected(self, unit_env):
        question_service = await unit_env.get(QuestionService)

        with pytest.raises(InvalidInputError, match="at most 20000"):
            await question_service.create_question(
                make_user(), "Title", "d" * 20001, []
            )


class TestGetQuestion:
    """Tests for get_question method."""

    @pytest.mark.asyncio
    async def test_unknown_question_raises_not_found(self, unit_env):
        question_service = await unit_env.get(QuestionService)

        with pytest.raises(NotFoundError, match="Question not found"):
            await question_service.get_question(QuestionId(uuid4()))


class TestListQuestions:
    """Tests for list_questions method."""

    @pytest.mark.asyncio
    async def test_pages_newest_first(self, unit_env):
        # Arrange
        question_service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)
        author = make_user()
        base = datetime(2024, 1, 1)
        for i in range(5):
            question = make_question(author, title=f"Q{i}").model_copy(
                update={"created_at": base + timedelta(hours=i)}
            )
            await question_repo.save(question)

        # Act
        page = await question_service.list_questions(page=2, limit=2)

        # Assert
        assert [q.title for q in page.questions] == ["Q2", "Q1"]
        assert page.total == 5
        assert page.total_pages == 3

    @pytest.mark.asyncio
    @pytest.mark.parametrize("page, limit", [(0, 10), (1, 0), (1, 101)])
    async def test_out_of_range_paging_is_rejected(self, unit_env, page, limit):
        question_service = await unit_env.get(QuestionService)

        with pytest.raises(InvalidInputError):
            await question_service.list_questions(page=page, limit=limit)
