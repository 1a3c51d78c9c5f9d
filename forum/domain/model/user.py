"""User aggregate root.

Users sign up with an email and password and own the questions,
answers and votes they create.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import Email, UserId


class User(DomainModel):
    """User aggregate root.

    The email doubles as the user's notification channel key.
    """

    id: UserId
    email: Email
    name: Optional[str] = Field(default=None, max_length=255)
    password_hash: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def display_name(self) -> str:
        """Name shown to other users (falls back to email)."""
        return self.name or self.email.root
