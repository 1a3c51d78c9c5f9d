"""Vote domain service.

Holds the vote ledger: each (voter, answer) pair has at most one vote,
and casting a vote moves that pair through a small state machine.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

import logfire
from sqlalchemy.exc import IntegrityError

from forum.domain.error import NotFoundError, VoteConflictError
from forum.domain.model import User
from forum.domain.model.vote import Vote
from forum.domain.repository import AnswerRepository, VoteRepository
from forum.domain.value import AnswerId, VoteDirection, VoteOutcome
from forum.domain.value.common import ValueObject

from .base import Service
from .notification_service import NotificationResult, NotificationService


def resolve_transition(
    existing: Optional[VoteDirection], requested: VoteDirection
) -> VoteOutcome:
    """Decide what casting ``requested`` does given the current vote.

    No vote creates one, the same direction again toggles it off, and
    the opposite direction switches it.
    """
    if existing is None:
        return VoteOutcome.CREATED
    if existing == requested:
        return VoteOutcome.REMOVED
    return VoteOutcome.UPDATED


@dataclass(frozen=True)
class CastVoteResult:
    """Result of casting a vote.

    ``direction`` is the vote now stored for the pair, None once removed.
    """

    outcome: VoteOutcome
    direction: Optional[VoteDirection]
    notification: NotificationResult


class AnswerScore(ValueObject):
    """Vote totals for one answer."""

    upvotes: int
    downvotes: int

    @property
    def score(self) -> int:
        return self.upvotes - self.downvotes


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        answer_repository: AnswerRepository,
        notification_service: NotificationService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            answer_repository: Answer repository (owner lookup)
            notification_service: Notification side channel
        """
        self.vote_repository = vote_repository
        self.answer_repository = answer_repository
        self.notification_service = notification_service

    async def cast_vote(
        self, voter: User, answer_id: AnswerId, direction: VoteDirection
    ) -> CastVoteResult:
        """Cast, switch or withdraw a vote on an answer.

        Args:
            voter: User casting the vote
            answer_id: Answer being voted on
            direction: Requested direction

        Returns:
            Outcome, resulting direction and the notification result

        Raises:
            NotFoundError: If the answer doesn't exist
            VoteConflictError: If a concurrent request changed the same vote
        """
        with logfire.span(
            "vote_service.cast_vote",
            answer_id=str(answer_id),
            user_id=str(voter.id),
            direction=direction.value,
        ):
            owner = await self.answer_repository.find_owner(answer_id)
            if owner is None:
                logfire.warn("Vote on non-existent answer", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))

            existing = await self.vote_repository.find(voter.id, answer_id)
            outcome = resolve_transition(
                existing.direction if existing else None, direction
            )

            if outcome == VoteOutcome.CREATED:
                now = datetime.now()
                vote = Vote(
                    user_id=voter.id,
                    answer_id=answer_id,
                    direction=direction,
                    created_at=now,
                    updated_at=now,
                )
                try:
                    await self.vote_repository.save(vote)
                except IntegrityError:
                    logfire.warn(
                        "Concurrent vote insert",
                        user_id=str(voter.id),
                        answer_id=str(answer_id),
                    )
                    raise VoteConflictError(str(voter.id), str(answer_id))
            elif outcome == VoteOutcome.UPDATED:
                updated = await self.vote_repository.update_direction(
                    voter.id, answer_id, direction
                )
                if updated is None:
                    logfire.warn(
                        "Vote vanished before update",
                        user_id=str(voter.id),
                        answer_id=str(answer_id),
                    )
                    raise VoteConflictError(str(voter.id), str(answer_id))
            else:
                if not await self.vote_repository.delete(voter.id, answer_id):
                    logfire.warn(
                        "Vote vanished before delete",
                        user_id=str(voter.id),
                        answer_id=str(answer_id),
                    )
                    raise VoteConflictError(str(voter.id), str(answer_id))

            logfire.info(
                "Vote cast",
                answer_id=str(answer_id),
                user_id=str(voter.id),
                outcome=outcome.value,
            )

            if outcome == VoteOutcome.REMOVED:
                notification = self.notification_service.skipped(
                    reason="vote removed"
                )
            elif owner.user_id == voter.id:
                notification = self.notification_service.skipped(
                    reason="own answer"
                )
            else:
                notification = await self.notification_service.send_vote_notification(
                    owner.email, direction, owner.question_id, answer_id
                )

            return CastVoteResult(
                outcome=outcome,
                direction=None if outcome == VoteOutcome.REMOVED else direction,
                notification=notification,
            )

    async def get_score(self, answer_id: AnswerId) -> AnswerScore:
        """Count the up and down votes on an answer.

        Args:
            answer_id: Answer ID

        Returns:
            Vote totals
        """
        with logfire.span("vote_service.get_score", answer_id=str(answer_id)):
            votes = await self.vote_repository.find_by_answer(answer_id)
            upvotes = sum(1 for v in votes if v.direction == VoteDirection.UP)
            return AnswerScore(upvotes=upvotes, downvotes=len(votes) - upvotes)

    async def get_votes_for_answers(self, answer_ids: Sequence[AnswerId]) -> list[Vote]:
        """Load the votes on several answers in one query.

        Args:
            answer_ids: Answers to collect votes for

        Returns:
            Votes on any of the answers
        """
        with logfire.span(
            "vote_service.get_votes_for_answers", answer_count=len(answer_ids)
        ):
            return await self.vote_repository.find_by_answers(answer_ids)
