"""
Pydantic schemas for API request/response models and ingestion documents.

These schemas define the structure of API data for serialization and validation.
"""

from .answer import AnswerCreate, AnswerDetail, AnswerListItem, AnswerSummary
from .common import CreatedResponse
from .ingest import (
    DocumentAnswer,
    DocumentComment,
    DocumentFormatError,
    DocumentQuestion,
    DocumentUser,
)
from .question import (
    CommentCreate,
    CommentResponse,
    QuestionCreate,
    QuestionDetail,
    QuestionSummary,
)
from .user import UserResponse

__all__ = [
    "AnswerCreate", "AnswerDetail", "AnswerListItem", "AnswerSummary",
    "CommentCreate", "CommentResponse",
    "CreatedResponse",
    "DocumentAnswer", "DocumentComment", "DocumentFormatError", "DocumentQuestion", "DocumentUser",
    "QuestionCreate", "QuestionDetail", "QuestionSummary",
    "UserResponse",
]
