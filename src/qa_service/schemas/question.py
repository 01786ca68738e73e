"""Question-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field

from qa_service.models.question import TITLE_MAX_LENGTH
from qa_service.schemas.common import EpochSeconds, UserIdField


class QuestionCreate(BaseModel):
    """Schema for creating a new question."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH - 1, description="Question title")
    body: str = Field(..., description="HTML body")
    user_id: UserIdField = Field(..., alias="userId", description="Author user ID")


class QuestionSummary(BaseModel):
    """List and search projection: plain-text preview instead of the body."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    preview: str
    creation: EpochSeconds
    score: int
    user_id: int
    user_name: str


class QuestionDetail(BaseModel):
    """Single-question projection with the full HTML body."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    body: str
    creation: EpochSeconds
    score: int
    user_id: int
    user_name: str


class CommentCreate(BaseModel):
    """Schema for commenting on a question."""

    model_config = ConfigDict(populate_by_name=True)

    body: str = Field(..., description="HTML body")
    user_id: UserIdField = Field(..., alias="userId", description="Author user ID")


class CommentResponse(BaseModel):
    """Comment on a question or an answer."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    body: str
    user_id: int
    user_name: str
