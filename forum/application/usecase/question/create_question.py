"""Create question use case."""

from datetime import datetime

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from forum.application.usecase.base import BaseUseCase
from forum.application.usecase.common import parse_uuid
from forum.domain.error import InvalidInputError
from forum.domain.service import QuestionService, UserService
from forum.domain.value import TagName, UserId


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    title: str
    description: str
    tags: list[str] = Field(default_factory=list)
    author_id: str  # From authenticated user


class CreateQuestionResponse(BaseModel):
    """Create question response."""

    id: str
    title: str
    description: str
    author_id: str
    tags: list[str]
    created_at: datetime


class CreateQuestionUseCase(BaseUseCase):
    """Use case for asking a question."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: CreateQuestionRequest) -> CreateQuestionResponse:
        """Execute create question flow.

        Raises:
            InvalidInputError: If title, description or a tag is invalid
            NotFoundError: If the author doesn't exist
        """
        try:
            tag_names = [TagName(tag) for tag in request.tags]
        except PydanticValidationError:
            raise InvalidInputError("Tag names must be 1-50 characters")

        author = await self.user_service.get_by_id(
            UserId(parse_uuid(request.author_id, "user"))
        )

        question = await self.question_service.create_question(
            author=author,
            title=request.title,
            description=request.description,
            tag_names=tag_names,
        )

        return CreateQuestionResponse(
            id=str(question.id),
            title=question.title,
            description=question.description,
            author_id=str(question.author_id),
            tags=[tag.root for tag in question.tag_names],
            created_at=question.created_at,
        )
