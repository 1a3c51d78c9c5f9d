"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase, ScoreInfo
from .get_score import GetAnswerScoreRequest, GetAnswerScoreUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "GetAnswerScoreRequest",
    "GetAnswerScoreUseCase",
    "ScoreInfo",
]
