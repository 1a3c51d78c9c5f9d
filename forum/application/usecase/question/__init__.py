"""Question use cases."""

from .create_question import (
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
)
from .get_question import (
    AnswerInfo,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
)
from .list_questions import (
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    QuestionSummary,
)

__all__ = [
    "AnswerInfo",
    "CreateQuestionRequest",
    "CreateQuestionResponse",
    "CreateQuestionUseCase",
    "GetQuestionRequest",
    "GetQuestionResponse",
    "GetQuestionUseCase",
    "ListQuestionsRequest",
    "ListQuestionsResponse",
    "ListQuestionsUseCase",
    "QuestionSummary",
]
