"""Read operations for answers outside the context of a question."""
from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from qa_service.models import Answer, AnswerComment, User
from qa_service.repositories.entity_store import EntityStore
from qa_service.schemas.answer import AnswerDetail, AnswerListItem
from qa_service.schemas.question import CommentResponse
from qa_service.services.errors import NotFoundError
from qa_service.utils.html import PREVIEW_LENGTH

__all__ = ["get_answer", "list_answer_comments", "list_answers"]


def list_answers(db: Session) -> list[AnswerListItem]:
    """Return every answer by a non-deleted author, oldest first."""
    stmt = (
        select(
            Answer.id,
            Answer.question_id,
            func.substr(Answer.text_body, 1, PREVIEW_LENGTH).label("preview"),
            Answer.creation,
            Answer.score,
            Answer.user_id,
            User.name.label("user_name"),
            Answer.accepted,
        )
        .join(User, Answer.user_id == User.id)
        .where(User.deleted.is_(False))
        .order_by(Answer.creation)
    )
    return [AnswerListItem.model_validate(row) for row in db.execute(stmt)]


def get_answer(db: Session, answer_id: int) -> AnswerDetail:
    """Return one answer with its full HTML body.

    Raises:
        NotFoundError: If the answer is absent or its author is deleted.
    """
    stmt = (
        select(
            Answer.id,
            Answer.question_id,
            Answer.html_body.label("body"),
            Answer.creation,
            Answer.score,
            Answer.user_id,
            User.name.label("user_name"),
            Answer.accepted,
        )
        .join(User, Answer.user_id == User.id)
        .where(Answer.id == answer_id, User.deleted.is_(False))
    )
    row = db.execute(stmt).first()
    if row is None:
        raise NotFoundError("Answer", answer_id)
    return AnswerDetail.model_validate(row)


def list_answer_comments(db: Session, answer_id: int) -> list[CommentResponse]:
    """Return the comments on an answer whose authors are not deleted."""
    if not EntityStore(db).answer_exists(answer_id):
        raise NotFoundError("Answer", answer_id)
    stmt = (
        select(
            AnswerComment.id,
            AnswerComment.html_body.label("body"),
            AnswerComment.user_id,
            User.name.label("user_name"),
        )
        .join(User, AnswerComment.user_id == User.id)
        .where(AnswerComment.answer_id == answer_id, User.deleted.is_(False))
    )
    return [CommentResponse.model_validate(row) for row in db.execute(stmt)]
