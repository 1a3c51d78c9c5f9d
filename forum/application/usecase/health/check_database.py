"""Database health check use case."""

import logfire
from pydantic import BaseModel

from forum.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    TagRepository,
    UserRepository,
)


class CheckDatabaseResponse(BaseModel):
    """Row counts proving the database answers queries."""

    users: int
    questions: int
    answers: int
    tags: int


class CheckDatabaseUseCase:
    """Use case for checking that the database is reachable."""

    def __init__(
        self,
        user_repository: UserRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        tag_repository: TagRepository,
    ) -> None:
        self.user_repository = user_repository
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.tag_repository = tag_repository

    async def execute(self) -> CheckDatabaseResponse:
        """Count rows in the main tables.

        Raises:
            Exception: Whatever the driver raises when the database is down
        """
        with logfire.span("check_database"):
            return CheckDatabaseResponse(
                users=await self.user_repository.count(),
                questions=await self.question_repository.count(),
                answers=await self.answer_repository.count(),
                tags=await self.tag_repository.count(),
            )
