"""Question entity."""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import QuestionId, TagName, UserId

MAX_TITLE_LENGTH = 300
MAX_DESCRIPTION_LENGTH = 20000


class Question(DomainModel):
    """Question asked by a user.

    Answers hang off a question; tags are attached by name.
    """

    id: QuestionId
    title: str = Field(min_length=1, max_length=MAX_TITLE_LENGTH)
    description: str = Field(min_length=1, max_length=MAX_DESCRIPTION_LENGTH)
    author_id: UserId
    tag_names: list[TagName] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
