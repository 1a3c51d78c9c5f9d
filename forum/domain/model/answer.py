"""Answer entity.

Answers form a reply tree per question: top-level answers have no
parent, replies point at the answer they respond to.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import AnswerId, QuestionId, UserId

MAX_CONTENT_LENGTH = 20000


class Answer(DomainModel):
    """Answer entity.

    Threading is managed through parent_id only (None for top-level).
    The tree is assembled at read time from the flat list of answers
    on a question.
    """

    id: AnswerId
    question_id: QuestionId
    author_id: UserId
    parent_id: Optional[AnswerId] = None
    content: str = Field(min_length=1, max_length=MAX_CONTENT_LENGTH)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
