"""Read and write operations for questions and their comments and answers."""
from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from qa_service.db.time import utcnow
from qa_service.models import Answer, Question, QuestionComment, User
from qa_service.repositories.entity_store import EntityStore
from qa_service.schemas.answer import AnswerCreate, AnswerSummary
from qa_service.schemas.question import (
    CommentCreate,
    CommentResponse,
    QuestionCreate,
    QuestionDetail,
    QuestionSummary,
)
from qa_service.services.errors import NotFoundError
from qa_service.utils.html import PREVIEW_LENGTH, html_to_plain_text

logger = logging.getLogger(__name__)

__all__ = [
    "create_answer",
    "create_question",
    "create_question_comment",
    "get_question",
    "list_question_answers",
    "list_question_comments",
    "list_questions",
    "question_summary_columns",
]


def question_summary_columns() -> tuple:
    """Columns of the preview projection shared by listing and search."""
    return (
        Question.id,
        Question.title,
        func.substr(Question.text_body, 1, PREVIEW_LENGTH).label("preview"),
        Question.creation,
        Question.score,
        Question.user_id,
        User.name.label("user_name"),
    )


def _require_question(db: Session, question_id: int) -> None:
    if not EntityStore(db).question_exists(question_id):
        raise NotFoundError("Question", question_id)


def _require_author(store: EntityStore, user_id: int) -> None:
    if not store.user_is_active(user_id):
        raise NotFoundError("User", user_id)


def list_questions(db: Session) -> list[QuestionSummary]:
    """Return every question by a non-deleted author, oldest first."""
    stmt = (
        select(*question_summary_columns())
        .join(User, Question.user_id == User.id)
        .where(User.deleted.is_(False))
        .order_by(Question.creation)
    )
    return [QuestionSummary.model_validate(row) for row in db.execute(stmt)]


def get_question(db: Session, question_id: int) -> QuestionDetail:
    """Return one question with its full HTML body.

    Raises:
        NotFoundError: If the question is absent or its author is deleted.
    """
    stmt = (
        select(
            Question.id,
            Question.title,
            Question.html_body.label("body"),
            Question.creation,
            Question.score,
            Question.user_id,
            User.name.label("user_name"),
        )
        .join(User, Question.user_id == User.id)
        .where(Question.id == question_id, User.deleted.is_(False))
    )
    row = db.execute(stmt).first()
    if row is None:
        raise NotFoundError("Question", question_id)
    return QuestionDetail.model_validate(row)


def list_question_comments(db: Session, question_id: int) -> list[CommentResponse]:
    """Return the comments on a question whose authors are not deleted."""
    _require_question(db, question_id)
    stmt = (
        select(
            QuestionComment.id,
            QuestionComment.html_body.label("body"),
            QuestionComment.user_id,
            User.name.label("user_name"),
        )
        .join(User, QuestionComment.user_id == User.id)
        .where(QuestionComment.question_id == question_id, User.deleted.is_(False))
    )
    return [CommentResponse.model_validate(row) for row in db.execute(stmt)]


def list_question_answers(db: Session, question_id: int) -> list[AnswerSummary]:
    """Return a question's answers, accepted ones first, then by score."""
    _require_question(db, question_id)
    stmt = (
        select(
            Answer.id,
            func.substr(Answer.text_body, 1, PREVIEW_LENGTH).label("preview"),
            Answer.creation,
            Answer.score,
            Answer.user_id,
            User.name.label("user_name"),
            Answer.accepted,
        )
        .join(User, Answer.user_id == User.id)
        .where(Answer.question_id == question_id, User.deleted.is_(False))
        .order_by(Answer.accepted.desc(), Answer.score.desc())
    )
    return [AnswerSummary.model_validate(row) for row in db.execute(stmt)]


def create_question(db: Session, data: QuestionCreate) -> int:
    """Store a new question with score 0 created now; return its id.

    Raises:
        NotFoundError: If the author does not exist or is deleted.
    """
    store = EntityStore(db)
    user_id = int(data.user_id)
    _require_author(store, user_id)
    question = store.add_question(
        title=data.title,
        html_body=data.body,
        text_body=html_to_plain_text(data.body),
        creation=utcnow(),
        score=0,
        user_id=user_id,
    )
    question_id = question.id
    db.commit()
    logger.info("Created question %s for user %s", question_id, user_id)
    return question_id


def create_question_comment(db: Session, question_id: int, data: CommentCreate) -> int:
    """Store a comment on an existing question; return its id."""
    store = EntityStore(db)
    _require_question(db, question_id)
    user_id = int(data.user_id)
    _require_author(store, user_id)
    comment = store.add_question_comment(question_id=question_id, html_body=data.body, user_id=user_id)
    comment_id = comment.id
    db.commit()
    return comment_id


def create_answer(db: Session, question_id: int, data: AnswerCreate) -> int:
    """Store an unaccepted answer with score 0 created now; return its id."""
    store = EntityStore(db)
    _require_question(db, question_id)
    user_id = int(data.user_id)
    _require_author(store, user_id)
    answer = store.add_answer(
        question_id=question_id,
        html_body=data.body,
        text_body=html_to_plain_text(data.body),
        creation=utcnow(),
        score=0,
        user_id=user_id,
        accepted=False,
    )
    answer_id = answer.id
    db.commit()
    logger.info("Created answer %s on question %s", answer_id, question_id)
    return answer_id
