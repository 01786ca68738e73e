"""Answer-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field

from qa_service.schemas.common import EpochSeconds, UserIdField


class AnswerCreate(BaseModel):
    """Schema for answering a question."""

    model_config = ConfigDict(populate_by_name=True)

    body: str = Field(..., description="HTML body")
    user_id: UserIdField = Field(..., alias="userId", description="Author user ID")


class AnswerSummary(BaseModel):
    """Answer projection with a plain-text preview."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    preview: str
    creation: EpochSeconds
    score: int
    user_id: int
    user_name: str
    accepted: bool


class AnswerListItem(AnswerSummary):
    """Answer preview outside the context of its question."""

    question_id: int


class AnswerDetail(BaseModel):
    """Single-answer projection with the full HTML body."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    question_id: int
    body: str
    creation: EpochSeconds
    score: int
    user_id: int
    user_name: str
    accepted: bool
