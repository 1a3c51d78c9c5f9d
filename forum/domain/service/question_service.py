"""Question domain service."""

import math
from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

import logfire

from forum.domain.error import InvalidInputError, NotFoundError
from forum.domain.model import Question, User
from forum.domain.model.question import MAX_DESCRIPTION_LENGTH, MAX_TITLE_LENGTH
from forum.domain.repository import QuestionRepository
from forum.domain.value import QuestionId, TagName

from .base import Service
from .tag_service import TagService

MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class QuestionPage:
    """One page of the question list."""

    questions: list[Question]
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit)


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(
        self, question_repository: QuestionRepository, tag_service: TagService
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            tag_service: Tag domain service
        """
        self.question_repository = question_repository
        self.tag_service = tag_service

    async def create_question(
        self,
        author: User,
        title: str,
        description: str,
        tag_names: list[TagName],
    ) -> Question:
        """Create a question, creating any tags it names.

        Args:
            author: User asking
            title: Question title
            description: Question body
            tag_names: Tags to attach

        Returns:
            The saved question

        Raises:
            InvalidInputError: If title or description is blank or too long
        """
        with logfire.span("question_service.create_question", author_id=str(author.id)):
            if not title or not title.strip():
                raise InvalidInputError("Title is required")
            if not description or not description.strip():
                raise InvalidInputError("Description is required")
            if len(title.strip()) > MAX_TITLE_LENGTH:
                raise InvalidInputError(
                    f"Title must be at most {MAX_TITLE_LENGTH} characters"
                )
            if len(description.strip()) > MAX_DESCRIPTION_LENGTH:
                raise InvalidInputError(
                    f"Description must be at most {MAX_DESCRIPTION_LENGTH} characters"
                )

            tags = await self.tag_service.get_or_create_tags(tag_names)

            now = datetime.now()
            question = Question(
                id=QuestionId(uuid4()),
                title=title.strip(),
                description=description.strip(),
                author_id=author.id,
                tag_names=[tag.name for tag in tags],
                created_at=now,
                updated_at=now,
            )
            saved = await self.question_repository.save(question)

            logfire.info(
                "Question created", question_id=str(saved.id), tag_count=len(tags)
            )
            return saved

    async def get_question(self, question_id: QuestionId) -> Question:
        """Get question by ID.

        Raises:
            NotFoundError: If question not found
        """
        with logfire.span("question_service.get_question", question_id=str(question_id)):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            return question

    async def list_questions(self, page: int = 1, limit: int = 10) -> QuestionPage:
        """List questions newest first, one page at a time.

        Args:
            page: 1-based page number
            limit: Page size (1-100)

        Returns:
            The requested page with totals

        Raises:
            InvalidInputError: If page or limit is out of range
        """
        if page < 1:
            raise InvalidInputError("Page must be at least 1")
        if limit < 1 or limit > MAX_PAGE_SIZE:
            raise InvalidInputError(f"Limit must be between 1 and {MAX_PAGE_SIZE}")

        with logfire.span("question_service.list_questions", page=page, limit=limit):
            questions = await self.question_repository.list_recent(
                limit=limit, offset=(page - 1) * limit
            )
            total = await self.question_repository.count()
            return QuestionPage(
                questions=questions, page=page, limit=limit, total=total
            )
