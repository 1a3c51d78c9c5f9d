"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from forum.domain.model.question import Question
from forum.domain.value import QuestionId


class QuestionRepository(ABC):
    """Repository for Question entity."""

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID, including its tag names.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_recent(self, limit: int, offset: int) -> list[Question]:
        """List questions newest first.

        Args:
            limit: Maximum number of questions
            offset: Number of questions to skip

        Returns:
            One page of questions
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all questions."""
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a new question and link its tags.

        Every name in ``question.tag_names`` must already exist as a tag.

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass
