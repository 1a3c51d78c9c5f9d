"""Vote entity.

A vote is one user's current opinion (up or down) on one answer.
"""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import AnswerId, UserId, VoteDirection


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - Identity is the (user_id, answer_id) pair; at most one vote exists
      per pair (enforced by the database primary key)
    - Re-voting the same direction removes the vote, the opposite
      direction flips it
    """

    user_id: UserId
    answer_id: AnswerId
    direction: VoteDirection
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def with_direction(self, direction: VoteDirection) -> "Vote":
        """Return a copy of this vote pointing the other way."""
        return self.model_copy(
            update={"direction": direction, "updated_at": datetime.now()}
        )
