"""Domain services."""

from .answer_service import AnswerNode, AnswerService, build_tree, tally
from .base import Service
from .jwt_service import JWTService
from .notification_service import (
    NotificationPublisher,
    NotificationResult,
    NotificationService,
)
from .question_service import QuestionPage, QuestionService
from .tag_service import TagService
from .user_service import UserService
from .vote_service import (
    AnswerScore,
    CastVoteResult,
    VoteService,
    resolve_transition,
)

__all__ = [
    "AnswerNode",
    "AnswerScore",
    "AnswerService",
    "CastVoteResult",
    "JWTService",
    "NotificationPublisher",
    "NotificationResult",
    "NotificationService",
    "QuestionPage",
    "QuestionService",
    "Service",
    "TagService",
    "UserService",
    "VoteService",
    "build_tree",
    "resolve_transition",
    "tally",
]
