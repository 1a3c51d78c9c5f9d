"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from forum.domain.model import Answer, Question, Tag, User, Vote
from forum.domain.value import (
    AnswerId,
    AnswerOwner,
    Email,
    QuestionId,
    TagId,
    TagName,
    UserId,
    VoteDirection,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> Optional[UUID]:
    return _uuid(value) if value is not None else None


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        email=Email(row["email"]),
        name=row.get("name"),
        password_hash=row.get("password_hash"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion
    """
    return user.model_dump()


def row_to_question(row: Dict[str, Any], tag_names: list[str]) -> Question:
    """Convert database row plus its tag names to Question domain model.

    Args:
        row: Database row as dict
        tag_names: Names of the tags linked to the question

    Returns:
        Question domain model
    """
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        description=row["description"],
        author_id=UserId(_uuid(row["author_id"])),
        tag_names=[TagName(name) for name in tag_names],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict.

    Tag names live in question_tags and are excluded here.
    """
    return question.model_dump(exclude={"tag_names"})


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag(
        id=TagId(_uuid(row["id"])),
        name=TagName(row["name"]),
        created_at=row["created_at"],
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict."""
    return tag.model_dump()


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model.

    Args:
        row: Database row as dict

    Returns:
        Answer domain model
    """
    parent_id = _optional_uuid(row.get("parent_id"))
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        parent_id=AnswerId(parent_id) if parent_id else None,
        content=row["content"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict."""
    return answer.model_dump()


def row_to_answer_owner(row: Dict[str, Any]) -> AnswerOwner:
    """Convert an answer/author join row to AnswerOwner."""
    return AnswerOwner(
        user_id=UserId(_uuid(row["author_id"])),
        email=Email(row["email"]),
        question_id=QuestionId(_uuid(row["question_id"])),
    )


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        user_id=UserId(_uuid(row["user_id"])),
        answer_id=AnswerId(_uuid(row["answer_id"])),
        direction=VoteDirection(row["direction"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    data = vote.model_dump()
    data["direction"] = vote.direction.value
    return data
