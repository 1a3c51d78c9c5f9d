"""Answer domain service."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Optional, Sequence
from uuid import uuid4

import logfire

from forum.domain.error import InvalidInputError, NotFoundError
from forum.domain.model import Answer, Question, User, Vote
from forum.domain.model.answer import MAX_CONTENT_LENGTH
from forum.domain.repository import AnswerRepository
from forum.domain.value import AnswerId, UserId, VoteDirection

from .base import Service


@dataclass
class AnswerNode:
    """Node in a question's reply tree.

    Carries the answer, its author, vote totals and the viewer's own vote.
    """

    answer: Answer
    author: Optional[User]
    upvotes: int = 0
    downvotes: int = 0
    user_vote: Optional[VoteDirection] = None
    replies: list["AnswerNode"] = field(default_factory=list)

    @property
    def score(self) -> int:
        return self.upvotes - self.downvotes


def tally(
    votes: Iterable[Vote], viewer_id: Optional[UserId] = None
) -> tuple[int, int, Optional[VoteDirection]]:
    """Count votes and pick out the viewer's own.

    Returns:
        (upvotes, downvotes, viewer's direction or None)
    """
    upvotes = downvotes = 0
    user_vote = None
    for vote in votes:
        if vote.direction == VoteDirection.UP:
            upvotes += 1
        else:
            downvotes += 1
        if viewer_id is not None and vote.user_id == viewer_id:
            user_vote = vote.direction
    return upvotes, downvotes, user_vote


def build_tree(
    answers: Sequence[Answer],
    votes: Iterable[Vote],
    authors: dict[UserId, User],
    viewer_id: Optional[UserId] = None,
) -> list[AnswerNode]:
    """Assemble the reply tree for a flat list of answers.

    Top-level answers come newest first, replies oldest first. An answer
    whose parent is not in ``answers`` is treated as top-level.

    Args:
        answers: Every answer on one question, any order
        votes: Votes on those answers
        authors: Authors by ID
        viewer_id: Viewer whose own vote is reported per node

    Returns:
        Root nodes with replies populated at every depth
    """
    votes_by_answer: dict[AnswerId, list[Vote]] = {}
    for vote in votes:
        votes_by_answer.setdefault(vote.answer_id, []).append(vote)

    index: dict[AnswerId, AnswerNode] = {}
    for answer in answers:
        upvotes, downvotes, user_vote = tally(
            votes_by_answer.get(answer.id, ()), viewer_id
        )
        index[answer.id] = AnswerNode(
            answer=answer,
            author=authors.get(answer.author_id),
            upvotes=upvotes,
            downvotes=downvotes,
            user_vote=user_vote,
        )

    # Grouping in oldest-first order leaves every replies list sorted
    roots: list[AnswerNode] = []
    for node in sorted(index.values(), key=lambda n: n.answer.created_at):
        parent_id = node.answer.parent_id
        parent = index.get(parent_id) if parent_id is not None else None
        if parent is None or parent is node:
            roots.append(node)
        else:
            parent.replies.append(node)

    roots.reverse()
    return roots


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(self, answer_repository: AnswerRepository) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
        """
        self.answer_repository = answer_repository

    async def get_answer_by_id(self, answer_id: AnswerId) -> Answer:
        """Get answer by ID.

        Raises:
            NotFoundError: If answer not found
        """
        answer = await self.answer_repository.find_by_id(answer_id)
        if not answer:
            raise NotFoundError("Answer", str(answer_id))
        return answer

    async def get_answers_for_question(self, question: Question) -> list[Answer]:
        """Get every answer on a question as a flat list."""
        with logfire.span(
            "answer_service.get_answers_for_question", question_id=str(question.id)
        ):
            answers = await self.answer_repository.find_by_question(question.id)
            logfire.info(
                "Answers retrieved", question_id=str(question.id), count=len(answers)
            )
            return answers

    async def create_answer(
        self,
        question: Question,
        author: User,
        content: str,
        parent_id: Optional[AnswerId] = None,
    ) -> tuple[Answer, Optional[Answer]]:
        """Create an answer or a reply to another answer.

        Args:
            question: Question being answered
            author: User writing the answer
            content: Answer text
            parent_id: Answer being replied to, None for a top-level answer

        Returns:
            The saved answer and its parent (None for a top-level answer)

        Raises:
            InvalidInputError: If content is blank or too long, or the parent is on
                another question
            NotFoundError: If the parent answer doesn't exist
        """
        with logfire.span(
            "answer_service.create_answer",
            question_id=str(question.id),
            author_id=str(author.id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            if not content or not content.strip():
                raise InvalidInputError("Content is required")
            if len(content.strip()) > MAX_CONTENT_LENGTH:
                raise InvalidInputError(
                    f"Content must be at most {MAX_CONTENT_LENGTH} characters"
                )

            parent = None
            if parent_id is not None:
                parent = await self.answer_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn("Reply to non-existent answer", parent_id=str(parent_id))
                    raise NotFoundError("Parent answer", str(parent_id))
                if parent.question_id != question.id:
                    raise InvalidInputError("Parent answer belongs to another question")

            now = datetime.now()
            answer = Answer(
                id=AnswerId(uuid4()),
                question_id=question.id,
                author_id=author.id,
                parent_id=parent_id,
                content=content.strip(),
                created_at=now,
                updated_at=now,
            )
            saved = await self.answer_repository.save(answer)

            logfire.info(
                "Answer created",
                answer_id=str(saved.id),
                question_id=str(question.id),
                is_reply=parent is not None,
            )
            return saved, parent
