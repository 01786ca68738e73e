"""Ranked full-text search over questions."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from qa_service.models import Question, User
from qa_service.repositories.search import text_match
from qa_service.schemas.question import QuestionSummary
from qa_service.services.questions import question_summary_columns


def search_questions(db: Session, query: str) -> list[QuestionSummary]:
    """Return questions matching ``query``, most relevant first.

    Uses the same preview projection as question listing and hides questions
    whose author is soft-deleted. Equal ranks keep the store's own order.
    """
    match = text_match(db.get_bind().dialect.name, query)
    if match is None:
        return []
    stmt = (
        select(*question_summary_columns())
        .join(User, Question.user_id == User.id)
        .where(match.condition, User.deleted.is_(False))
        .order_by(match.rank.desc())
    )
    return [QuestionSummary.model_validate(row) for row in db.execute(stmt)]
