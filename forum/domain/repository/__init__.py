"""Repository interfaces for the forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from forum.domain.repository.answer import AnswerRepository
from forum.domain.repository.question import QuestionRepository
from forum.domain.repository.tag import TagRepository
from forum.domain.repository.user import UserRepository
from forum.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "QuestionRepository",
    "AnswerRepository",
    "VoteRepository",
    "TagRepository",
]
