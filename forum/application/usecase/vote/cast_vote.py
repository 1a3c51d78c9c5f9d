"""Cast vote use case."""

from typing import Any, Optional

from pydantic import BaseModel

from forum.application.usecase.common import NotificationInfo, parse_uuid
from forum.domain.service import AnswerScore, UserService, VoteService
from forum.domain.value import AnswerId, UserId, VoteDirection, VoteOutcome


class CastVoteRequest(BaseModel):
    """Cast vote request.

    ``type`` is kept raw so an unknown direction is reported as invalid
    input rather than a schema error.
    """

    answer_id: str
    user_id: str  # From authenticated user
    type: Any = None


class ScoreInfo(BaseModel):
    """Vote totals on an answer."""

    upvotes: int
    downvotes: int
    score: int

    @classmethod
    def from_score(cls, score: AnswerScore) -> "ScoreInfo":
        return cls(
            upvotes=score.upvotes, downvotes=score.downvotes, score=score.score
        )


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    success: bool
    message: str
    outcome: VoteOutcome
    direction: Optional[VoteDirection]
    score: ScoreInfo
    notification: NotificationInfo


class CastVoteUseCase:
    """Use case for voting on an answer.

    Voting the same way twice withdraws the vote; voting the other way
    switches it.
    """

    def __init__(self, vote_service: VoteService, user_service: UserService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            user_service: User domain service
        """
        self.vote_service = vote_service
        self.user_service = user_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Outcome, new totals and what happened to the notification

        Raises:
            InvalidInputError: If the direction or an ID is malformed
            NotFoundError: If the voter or the answer doesn't exist
            VoteConflictError: If a concurrent request changed the same vote
        """
        # Validate input before touching the store
        direction = VoteDirection.parse(request.type)
        answer_id = AnswerId(parse_uuid(request.answer_id, "answer"))
        user_id = UserId(parse_uuid(request.user_id, "user"))

        voter = await self.user_service.get_by_id(user_id)
        result = await self.vote_service.cast_vote(voter, answer_id, direction)
        score = await self.vote_service.get_score(answer_id)

        return CastVoteResponse(
            success=True,
            message=result.outcome.message,
            outcome=result.outcome,
            direction=result.direction,
            score=ScoreInfo.from_score(score),
            notification=NotificationInfo.from_result(result.notification),
        )
