"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from forum.domain.error import InvalidInputError
from forum.domain.value.common import RootValueObject, ValueObject
from forum.domain.value.identifiers import QuestionId, UserId


class VoteDirection(str, Enum):
    """Direction of a vote on an answer."""

    UP = "up"
    DOWN = "down"

    @classmethod
    def parse(cls, raw: object) -> "VoteDirection":
        """Parse a direction from untrusted request input.

        Args:
            raw: Value taken from the request body

        Returns:
            The matching direction

        Raises:
            InvalidInputError: If the value is not exactly "up" or "down"
        """
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            for direction in cls:
                if direction.value == raw:
                    return direction
        raise InvalidInputError("Invalid vote type")


class VoteOutcome(str, Enum):
    """Effect of casting a vote."""

    CREATED = "created"
    UPDATED = "updated"
    REMOVED = "removed"

    @property
    def message(self) -> str:
        """User-facing confirmation for this outcome."""
        return _OUTCOME_MESSAGES[self]


_OUTCOME_MESSAGES = {
    VoteOutcome.CREATED: "Vote recorded successfully",
    VoteOutcome.UPDATED: "Vote updated successfully",
    VoteOutcome.REMOVED: "Vote removed successfully",
}


class NotificationEvent(str, Enum):
    """Event names pushed to a user's notification channel."""

    NEW_ANSWER = "new-answer"
    NEW_REPLY = "new-reply"
    NEW_VOTE = "new-vote"


class NotificationStatus(str, Enum):
    """What happened to a best-effort notification."""

    SENT = "sent"
    FAILED = "failed"
    SKIPPED = "skipped"


class TagName(RootValueObject[str]):
    """Tag name for categorizing questions.

    Surrounding whitespace is dropped; 1-50 characters remain.
    Examples: 'python', 'sql', 'next.js'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name length."""
        v = v.strip()
        if len(v) < 1 or len(v) > 50:
            raise ValueError("Tag name must be 1-50 characters")
        return v


class Email(RootValueObject[str]):
    """Email address identifying a user account.

    Stored lower-cased so lookups are case-insensitive.
    """

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate email shape."""
        v = v.strip().lower()
        if len(v) > 255:
            raise ValueError("Email must be at most 255 characters")
        local, sep, domain = v.partition("@")
        if not sep or not local or not domain or "@" in domain:
            raise ValueError("Email must look like name@domain")
        return v


class AnswerOwner(ValueObject):
    """Owner of an answer, as needed to notify them.

    Resolved in one lookup so the vote path does not load the full answer.
    """

    user_id: UserId
    email: Email
    question_id: QuestionId
