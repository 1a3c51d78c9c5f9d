"""Domain model entities for the forum."""

from forum.domain.model.answer import Answer
from forum.domain.model.question import Question
from forum.domain.model.tag import Tag
from forum.domain.model.user import User
from forum.domain.model.vote import Vote

__all__ = [
    "User",
    "Question",
    "Answer",
    "Vote",
    "Tag",
]
