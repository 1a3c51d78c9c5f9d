"""Create answer use case."""

from datetime import datetime
from typing import Optional

import logfire
from pydantic import BaseModel

from forum.application.usecase.common import NotificationInfo, parse_uuid
from forum.domain.model import Answer, Question, User
from forum.domain.service import (
    AnswerService,
    NotificationResult,
    NotificationService,
    QuestionService,
    UserService,
)
from forum.domain.value import AnswerId, QuestionId, UserId


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    question_id: str
    content: str
    parent_id: Optional[str] = None  # Set when replying to another answer
    author_id: str  # From authenticated user


class CreateAnswerResponse(BaseModel):
    """Create answer response."""

    id: str
    question_id: str
    parent_id: Optional[str]
    author_id: str
    content: str
    created_at: datetime
    notification: NotificationInfo


class CreateAnswerUseCase:
    """Use case for answering a question or replying to an answer.

    After the answer is saved, the question author (for a top-level
    answer) or the parent answer's author (for a reply) is notified.
    """

    def __init__(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        user_service: UserService,
        notification_service: NotificationService,
    ) -> None:
        """Initialize create answer use case.

        Args:
            answer_service: Answer domain service
            question_service: Question domain service
            user_service: User domain service
            notification_service: Notification side channel
        """
        self.answer_service = answer_service
        self.question_service = question_service
        self.user_service = user_service
        self.notification_service = notification_service

    async def execute(self, request: CreateAnswerRequest) -> CreateAnswerResponse:
        """Execute create answer flow.

        Raises:
            InvalidInputError: If an ID is malformed, the content is blank or
                the parent is on another question
            NotFoundError: If the author, question or parent doesn't exist
        """
        question_id = QuestionId(parse_uuid(request.question_id, "question"))
        parent_id = (
            AnswerId(parse_uuid(request.parent_id, "parent answer"))
            if request.parent_id
            else None
        )

        author = await self.user_service.get_by_id(
            UserId(parse_uuid(request.author_id, "user"))
        )
        question = await self.question_service.get_question(question_id)

        answer, parent = await self.answer_service.create_answer(
            question=question,
            author=author,
            content=request.content,
            parent_id=parent_id,
        )

        notification = await self._notify(question, author, answer, parent)

        return CreateAnswerResponse(
            id=str(answer.id),
            question_id=str(answer.question_id),
            parent_id=str(answer.parent_id) if answer.parent_id else None,
            author_id=str(answer.author_id),
            content=answer.content,
            created_at=answer.created_at,
            notification=NotificationInfo.from_result(notification),
        )

    async def _notify(
        self,
        question: Question,
        author: User,
        answer: Answer,
        parent: Optional[Answer],
    ) -> NotificationResult:
        recipient_id = parent.author_id if parent else question.author_id
        if recipient_id == author.id:
            return self.notification_service.skipped(reason="own content")

        recipients = await self.user_service.get_users_by_ids([recipient_id])
        recipient = recipients.get(recipient_id)
        if recipient is None:
            logfire.warn("Notification recipient missing", user_id=str(recipient_id))
            return self.notification_service.skipped(reason="recipient not found")

        if parent is None:
            return await self.notification_service.send_answer_notification(
                question_owner_email=recipient.email,
                answerer_name=author.display_name,
                question_title=question.title,
                question_id=question.id,
                answer_id=answer.id,
            )

        return await self.notification_service.send_reply_notification(
            target_email=recipient.email,
            replier_name=author.display_name,
            question_id=question.id,
            answer_id=answer.id,
            is_question_owner=parent.author_id == question.author_id,
        )
