"""In-memory vote repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from forum.domain.model.vote import Vote
from forum.domain.repository.vote import VoteRepository
from forum.domain.value import AnswerId, UserId, VoteDirection


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Keyed by the (user_id, answer_id) pair like the table's primary key.
    """

    def __init__(self) -> None:
        self._votes: dict[tuple[UserId, AnswerId], Vote] = {}

    async def find(self, user_id: UserId, answer_id: AnswerId) -> Optional[Vote]:
        """Find a user's vote on an answer."""
        return self._votes.get((user_id, answer_id))

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote."""
        key = (vote.user_id, vote.answer_id)
        if key in self._votes:
            raise IntegrityError("Duplicate vote", None, Exception())
        self._votes[key] = vote
        return vote

    async def update_direction(
        self, user_id: UserId, answer_id: AnswerId, direction: VoteDirection
    ) -> Optional[Vote]:
        """Flip an existing vote."""
        existing = self._votes.get((user_id, answer_id))
        if existing is None:
            return None
        updated = existing.with_direction(direction)
        self._votes[(user_id, answer_id)] = updated
        return updated

    async def delete(self, user_id: UserId, answer_id: AnswerId) -> bool:
        """Delete a user's vote on an answer."""
        return self._votes.pop((user_id, answer_id), None) is not None

    async def find_by_answer(self, answer_id: AnswerId) -> list[Vote]:
        """Find all votes on an answer."""
        return [v for v in self._votes.values() if v.answer_id == answer_id]

    async def find_by_answers(self, answer_ids: Sequence[AnswerId]) -> list[Vote]:
        """Find all votes on several answers."""
        wanted = set(answer_ids)
        return [v for v in self._votes.values() if v.answer_id in wanted]
