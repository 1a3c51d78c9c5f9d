"""Domain value objects for the forum."""

from forum.domain.value.identifiers import (
    AnswerId,
    QuestionId,
    TagId,
    UserId,
)
from forum.domain.value.types import (
    AnswerOwner,
    Email,
    NotificationEvent,
    NotificationStatus,
    TagName,
    VoteDirection,
    VoteOutcome,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "TagId",
    # Types
    "AnswerOwner",
    "Email",
    "NotificationEvent",
    "NotificationStatus",
    "TagName",
    "VoteDirection",
    "VoteOutcome",
]
