"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from forum.domain.model.answer import Answer
from forum.domain.value import AnswerId, AnswerOwner, QuestionId


class AnswerRepository(ABC):
    """Repository for Answer entity."""

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find every answer on a question, replies included.

        The result is flat; callers assemble the reply tree.

        Args:
            question_id: The question's ID

        Returns:
            All answers on the question ordered by creation time
        """
        pass

    @abstractmethod
    async def find_owner(self, answer_id: AnswerId) -> Optional[AnswerOwner]:
        """Resolve who wrote an answer and which question it belongs to.

        Args:
            answer_id: The answer's ID

        Returns:
            Owner id, email and question id, or None if the answer is unknown
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save a new answer.

        Args:
            answer: The answer to save

        Returns:
            The saved answer
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all answers."""
        pass
