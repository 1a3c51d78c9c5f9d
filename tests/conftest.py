"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

from forum.domain.model import Answer, Question, User
from forum.domain.value import AnswerId, Email, QuestionId, TagName, UserId


def make_user(email: str = "someone@example.com", name: str | None = None) -> User:
    """Helper to build a user without going through signup.

    Args:
        email: Account email
        name: Optional display name

    Returns:
        Unsaved User entity
    """
    return User(id=UserId(uuid4()), email=Email(email), name=name)


def make_question(
    author: User, title: str = "How do I test this?", tags: list[str] | None = None
) -> Question:
    """Helper to build a question by ``author``."""
    return Question(
        id=QuestionId(uuid4()),
        title=title,
        description="Some details about the problem.",
        author_id=author.id,
        tag_names=[TagName(t) for t in tags or []],
    )


def make_answer(
    question: Question,
    author: User,
    parent: Answer | None = None,
    content: str = "Have you tried turning it off and on again?",
    minutes: int = 0,
) -> Answer:
    """Helper to build an answer (or a reply when ``parent`` is given).

    Args:
        question: Question being answered
        author: Answer author
        parent: Answer being replied to
        content: Answer text
        minutes: Offset from a fixed base time, to control ordering

    Returns:
        Unsaved Answer entity
    """
    created_at = datetime(2024, 1, 1, 12, 0) + timedelta(minutes=minutes)
    return Answer(
        id=AnswerId(uuid4()),
        question_id=question.id,
        author_id=author.id,
        parent_id=parent.id if parent else None,
        content=content,
        created_at=created_at,
        updated_at=created_at,
    )
