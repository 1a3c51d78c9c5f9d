"""Tag entity for categorizing questions."""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import TagId, TagName


class Tag(DomainModel):
    """Tag entity.

    Tags are created on first use when a question names them.
    """

    id: TagId
    name: TagName  # Unique
    created_at: datetime = Field(default_factory=datetime.now)
