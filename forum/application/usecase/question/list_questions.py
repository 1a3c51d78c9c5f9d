"""List questions use case."""

from datetime import datetime

from pydantic import BaseModel

from forum.application.usecase.common import UserInfo
from forum.domain.service import QuestionService, UserService


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    page: int = 1
    limit: int = 10


class QuestionSummary(BaseModel):
    """Question as shown in the list."""

    id: str
    title: str
    description: str
    tags: list[str]
    author: UserInfo | None
    created_at: datetime


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionSummary]
    page: int
    limit: int
    total: int
    total_pages: int


class ListQuestionsUseCase:
    """Use case for listing questions newest first."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Raises:
            InvalidInputError: If page or limit is out of range
        """
        page = await self.question_service.list_questions(
            page=request.page, limit=request.limit
        )
        authors = await self.user_service.get_users_by_ids(
            [q.author_id for q in page.questions]
        )

        return ListQuestionsResponse(
            questions=[
                QuestionSummary(
                    id=str(q.id),
                    title=q.title,
                    description=q.description,
                    tags=[tag.root for tag in q.tag_names],
                    author=(
                        UserInfo.from_user(authors[q.author_id])
                        if q.author_id in authors
                        else None
                    ),
                    created_at=q.created_at,
                )
                for q in page.questions
            ],
            page=page.page,
            limit=page.limit,
            total=page.total,
            total_pages=page.total_pages,
        )
