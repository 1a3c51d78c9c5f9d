"""In-memory question repository for testing."""

from typing import Optional

from forum.domain.model import Question
from forum.domain.repository import QuestionRepository
from forum.domain.value import QuestionId


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    async def list_recent(self, limit: int, offset: int) -> list[Question]:
        """List questions newest first."""
        questions = sorted(
            self._questions.values(), key=lambda q: q.created_at, reverse=True
        )
        return questions[offset : offset + limit]

    async def count(self) -> int:
        """Count all questions."""
        return len(self._questions)

    async def save(self, question: Question) -> Question:
        """Save a new question."""
        self._questions[question.id] = question
        return question
