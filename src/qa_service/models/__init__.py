"""SQLAlchemy models for the Q&A service."""

from .answer import Answer, AnswerComment
from .question import Question, QuestionComment
from .user import User

__all__ = [
    "Answer", "AnswerComment",
    "Question", "QuestionComment",
    "User",
]
