"""SQLAlchemy models for questions and their comments."""

from __future__ import annotations

import datetime

from sqlalchemy import DDL, DateTime, ForeignKey, Integer, String, Text, event
from sqlalchemy.orm import Mapped, mapped_column

from qa_service.db.session import Base
from qa_service.models.user import Id64

TITLE_MAX_LENGTH = 128


class Question(Base):
    """Top-level post; ``text_body`` is the plain-text rendering of ``html_body``."""

    __tablename__ = "questions"

    id: Mapped[int] = mapped_column(Id64, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)
    html_body: Mapped[str] = mapped_column(Text, nullable=False)
    text_body: Mapped[str] = mapped_column(Text, nullable=False)
    creation: Mapped[datetime.datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    score: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    user_id: Mapped[int] = mapped_column(Id64, ForeignKey("users.id"), nullable=False)


class QuestionComment(Base):
    """Comment attached directly to a question."""

    __tablename__ = "q_comments"

    id: Mapped[int] = mapped_column(Id64, primary_key=True, autoincrement=True)
    question_id: Mapped[int] = mapped_column(Id64, ForeignKey("questions.id"), nullable=False, index=True)
    html_body: Mapped[str] = mapped_column(Text, nullable=False)
    user_id: Mapped[int] = mapped_column(Id64, ForeignKey("users.id"), nullable=False)


# The search vector is maintained by PostgreSQL itself; other backends go without it.
event.listen(
    Question.__table__,
    "after_create",
    DDL(
        "ALTER TABLE questions ADD COLUMN ts_body tsvector "
        "GENERATED ALWAYS AS (to_tsvector('english', text_body)) STORED"
    ).execute_if(dialect="postgresql"),
)
event.listen(
    Question.__table__,
    "after_create",
    DDL("CREATE INDEX ix_questions_ts_body ON questions USING GIN (ts_body)").execute_if(
        dialect="postgresql"
    ),
)
