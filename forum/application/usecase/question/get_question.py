"""Get question use case."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from forum.application.usecase.common import UserInfo, parse_uuid
from forum.domain.service import (
    AnswerNode,
    AnswerService,
    QuestionService,
    UserService,
    VoteService,
    build_tree,
)
from forum.domain.value import QuestionId, UserId, VoteDirection


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str
    viewer_id: Optional[str] = None  # None for anonymous viewers


class AnswerInfo(BaseModel):
    """Answer with its vote totals and its place in the thread.

    Answers are returned flat, in display order: each top-level answer
    followed by its replies depth-first. ``depth`` is 0 for top-level
    answers and ``reply_ids`` lists direct replies oldest first.
    """

    id: str
    content: str
    parent_id: Optional[str]
    depth: int
    reply_ids: list[str]
    author: Optional[UserInfo]
    upvotes: int
    downvotes: int
    score: int
    user_vote: Optional[VoteDirection]
    created_at: datetime


class GetQuestionResponse(BaseModel):
    """Get question response."""

    id: str
    title: str
    description: str
    tags: list[str]
    author: Optional[UserInfo]
    created_at: datetime
    answers: list[AnswerInfo]


def flatten_tree(roots: list[AnswerNode]) -> list[AnswerInfo]:
    """Walk the reply tree depth-first without recursion."""
    infos: list[AnswerInfo] = []
    stack = [(node, 0) for node in reversed(roots)]
    while stack:
        node, depth = stack.pop()
        answer = node.answer
        infos.append(
            AnswerInfo(
                id=str(answer.id),
                content=answer.content,
                # Orphans are shown top-level
                parent_id=str(answer.parent_id) if depth else None,
                depth=depth,
                reply_ids=[str(reply.answer.id) for reply in node.replies],
                author=UserInfo.from_user(node.author) if node.author else None,
                upvotes=node.upvotes,
                downvotes=node.downvotes,
                score=node.score,
                user_vote=node.user_vote,
                created_at=answer.created_at,
            )
        )
        stack.extend((reply, depth + 1) for reply in reversed(node.replies))
    return infos


class GetQuestionUseCase:
    """Use case for reading a question with its answer tree."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        vote_service: VoteService,
        user_service: UserService,
    ) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            vote_service: Vote domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.vote_service = vote_service
        self.user_service = user_service

    async def execute(self, request: GetQuestionRequest) -> GetQuestionResponse:
        """Execute get question flow.

        Loads the question, every answer on it and their votes in a fixed
        number of queries, then assembles the reply tree in memory.

        Raises:
            InvalidInputError: If the question ID is malformed
            NotFoundError: If the question doesn't exist
        """
        question_id = QuestionId(parse_uuid(request.question_id, "question"))
        question = await self.question_service.get_question(question_id)

        answers = await self.answer_service.get_answers_for_question(question)
        votes = await self.vote_service.get_votes_for_answers(
            [a.id for a in answers]
        )
        users = await self.user_service.get_users_by_ids(
            [question.author_id, *(a.author_id for a in answers)]
        )

        viewer_id = None
        if request.viewer_id:
            viewer_id = UserId(parse_uuid(request.viewer_id, "user"))

        tree = build_tree(answers, votes, users, viewer_id)

        author = users.get(question.author_id)
        return GetQuestionResponse(
            id=str(question.id),
            title=question.title,
            description=question.description,
            tags=[tag.root for tag in question.tag_names],
            author=UserInfo.from_user(author) if author else None,
            created_at=question.created_at,
            answers=flatten_tree(tree),
        )
