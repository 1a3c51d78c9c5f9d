"""Get answer score use case."""

from pydantic import BaseModel

from forum.application.usecase.common import parse_uuid
from forum.domain.service import AnswerService, VoteService
from forum.domain.value import AnswerId

from .cast_vote import ScoreInfo


class GetAnswerScoreRequest(BaseModel):
    """Get answer score request."""

    answer_id: str


class GetAnswerScoreUseCase:
    """Use case for reading the vote totals on an answer."""

    def __init__(self, vote_service: VoteService, answer_service: AnswerService) -> None:
        self.vote_service = vote_service
        self.answer_service = answer_service

    async def execute(self, request: GetAnswerScoreRequest) -> ScoreInfo:
        """Execute get score flow.

        Raises:
            InvalidInputError: If the answer ID is malformed
            NotFoundError: If the answer doesn't exist
        """
        answer_id = AnswerId(parse_uuid(request.answer_id, "answer"))
        await self.answer_service.get_answer_by_id(answer_id)

        score = await self.vote_service.get_score(answer_id)
        return ScoreInfo.from_score(score)
