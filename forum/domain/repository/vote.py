"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from forum.domain.model.vote import Vote
from forum.domain.value import AnswerId, UserId, VoteDirection


class VoteRepository(ABC):
    """Repository for Vote entity.

    Votes are keyed by the (user_id, answer_id) pair; there is no
    surrogate ID. Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find(self, user_id: UserId, answer_id: AnswerId) -> Optional[Vote]:
        """Find a user's vote on an answer.

        Args:
            user_id: The voter's ID
            answer_id: The answer's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a new vote.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If a vote already exists for this user/answer pair
        """
        pass

    @abstractmethod
    async def update_direction(
        self, user_id: UserId, answer_id: AnswerId, direction: VoteDirection
    ) -> Optional[Vote]:
        """Point an existing vote the other way.

        Args:
            user_id: The voter's ID
            answer_id: The answer's ID
            direction: New direction

        Returns:
            The updated vote, or None if no vote existed
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId, answer_id: AnswerId) -> bool:
        """Delete a user's vote on an answer.

        Args:
            user_id: The voter's ID
            answer_id: The answer's ID

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass

    @abstractmethod
    async def find_by_answer(self, answer_id: AnswerId) -> list[Vote]:
        """Find all votes on an answer.

        Args:
            answer_id: The answer's ID

        Returns:
            List of votes on the answer
        """
        pass

    @abstractmethod
    async def find_by_answers(self, answer_ids: Sequence[AnswerId]) -> list[Vote]:
        """Find all votes on several answers (batch query).

        Args:
            answer_ids: Answer IDs to collect votes for

        Returns:
            Votes on any of the given answers
        """
        pass
