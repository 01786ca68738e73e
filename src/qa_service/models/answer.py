"""SQLAlchemy models for answers and their comments."""

from __future__ import annotations

import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from qa_service.db.session import Base
from qa_service.models.user import Id64


class Answer(Base):
    """Answer to a question.

    More than one answer per question may be flagged ``accepted``; nothing in
    the schema prevents it.
    """

    __tablename__ = "answers"

    id: Mapped[int] = mapped_column(Id64, primary_key=True, autoincrement=True)
    question_id: Mapped[int] = mapped_column(Id64, ForeignKey("questions.id"), nullable=False, index=True)
    html_body: Mapped[str] = mapped_column(Text, nullable=False)
    text_body: Mapped[str] = mapped_column(Text, nullable=False)
    creation: Mapped[datetime.datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    score: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    user_id: Mapped[int] = mapped_column(Id64, ForeignKey("users.id"), nullable=False)
    accepted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class AnswerComment(Base):
    """Comment attached to an answer."""

    __tablename__ = "a_comments"

    id: Mapped[int] = mapped_column(Id64, primary_key=True, autoincrement=True)
    answer_id: Mapped[int] = mapped_column(Id64, ForeignKey("answers.id"), nullable=False, index=True)
    html_body: Mapped[str] = mapped_column(Text, nullable=False)
    user_id: Mapped[int] = mapped_column(Id64, ForeignKey("users.id"), nullable=False)
