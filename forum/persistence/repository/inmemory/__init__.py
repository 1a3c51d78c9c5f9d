"""In-memory repository implementations for testing."""

from .answer import InMemoryAnswerRepository
from .question import InMemoryQuestionRepository
from .tag import InMemoryTagRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryAnswerRepository",
    "InMemoryQuestionRepository",
    "InMemoryTagRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
