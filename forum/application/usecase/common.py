"""Helpers and response models shared by use cases."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from forum.domain.error import InvalidInputError
from forum.domain.model import User
from forum.domain.service import NotificationResult
from forum.domain.value import NotificationEvent, NotificationStatus


def parse_uuid(raw: str, what: str) -> UUID:
    """Parse an ID taken from a request.

    Raises:
        InvalidInputError: If ``raw`` is not a UUID
    """
    try:
        return UUID(raw)
    except (TypeError, ValueError, AttributeError):
        raise InvalidInputError(f"Invalid {what} ID")


class UserInfo(BaseModel):
    """Public user information."""

    id: str
    name: str
    email: str
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            id=str(user.id),
            name=user.display_name,
            email=user.email.root,
            created_at=user.created_at,
        )


class NotificationInfo(BaseModel):
    """Outcome of a best-effort notification."""

    status: NotificationStatus
    event: Optional[NotificationEvent] = None
    error: Optional[str] = None

    @classmethod
    def from_result(cls, result: NotificationResult) -> "NotificationInfo":
        return cls(status=result.status, event=result.event, error=result.error)
