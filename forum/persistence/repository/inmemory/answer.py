"""In-memory answer repository for testing."""

from typing import Optional

from forum.domain.model import Answer
from forum.domain.repository import AnswerRepository, UserRepository
from forum.domain.value import AnswerId, AnswerOwner, QuestionId


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing.

    Reads authors from the user repository to resolve answer owners,
    mirroring the join the SQL implementation does.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self._answers: dict[AnswerId, Answer] = {}
        self.user_repository = user_repository

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        return self._answers.get(answer_id)

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find every answer on a question ordered by creation time."""
        answers = [a for a in self._answers.values() if a.question_id == question_id]
        return sorted(answers, key=lambda a: a.created_at)

    async def find_owner(self, answer_id: AnswerId) -> Optional[AnswerOwner]:
        """Resolve an answer's author and question."""
        answer = self._answers.get(answer_id)
        if not answer:
            return None
        author = await self.user_repository.find_by_id(answer.author_id)
        if not author:
            return None
        return AnswerOwner(
            user_id=author.id, email=author.email, question_id=answer.question_id
        )

    async def save(self, answer: Answer) -> Answer:
        """Save a new answer."""
        self._answers[answer.id] = answer
        return answer

    async def count(self) -> int:
        """Count all answers."""
        return len(self._answers)
