"""Write-side data access for users, questions, answers and comments."""
from __future__ import annotations

import datetime

from sqlalchemy import Select, exists, func, select
from sqlalchemy.orm import Session

from qa_service.models import Answer, AnswerComment, Question, QuestionComment, User

__all__ = ["EntityStore", "id_sequence_updates"]

# Tables whose ids come from an identity sequence but may also be supplied by the corpus.
SEQUENCED_MODELS = (Question, QuestionComment, Answer, AnswerComment)


def id_sequence_updates() -> list[Select]:
    """Statements moving each identity sequence to the highest stored id.

    PostgreSQL only. Rows inserted with an explicit id leave the sequence
    where it was.
    """
    return [
        select(
            func.setval(
                func.pg_get_serial_sequence(model.__tablename__, "id"),
                func.coalesce(func.max(model.id), 1),
            )
        )
        for model in SEQUENCED_MODELS
    ]


class EntityStore:
    """Thin wrapper around the session for inserting Q&A entities.

    Every insert is flushed immediately so that a constraint violation is
    raised at the record that caused it. Plain-text bodies are passed in
    already derived; this class never touches HTML.
    """

    def __init__(self, session: Session) -> None:
        """Initialize the store with a SQLAlchemy session."""
        self.session = session

    def ensure_user(self, user_id: int, name: str) -> bool:
        """Insert the user unless the id is already present.

        An existing row is left untouched, including its name.

        Returns:
            True when a row was inserted, False when the user already existed.
        """
        if self.session.get(User, user_id) is not None:
            return False
        self.session.add(User(id=user_id, name=name, deleted=False))
        self.session.flush()
        return True

    def user_is_active(self, user_id: int) -> bool:
        """Return whether the user exists and is not soft-deleted."""
        stmt = select(exists().where(User.id == user_id, User.deleted.is_(False)))
        return bool(self.session.scalar(stmt))

    def question_exists(self, question_id: int) -> bool:
        """Return whether a question row with this id is stored."""
        return bool(self.session.scalar(select(exists().where(Question.id == question_id))))

    def answer_exists(self, answer_id: int) -> bool:
        """Return whether an answer row with this id is stored."""
        return bool(self.session.scalar(select(exists().where(Answer.id == answer_id))))

    def add_question(
        self,
        *,
        title: str,
        html_body: str,
        text_body: str,
        creation: datetime.datetime,
        score: int,
        user_id: int,
        question_id: int | None = None,
    ) -> Question:
        """Insert a question; the store generates the id when none is given."""
        question = Question(
            id=question_id,
            title=title,
            html_body=html_body,
            text_body=text_body,
            creation=creation,
            score=score,
            user_id=user_id,
        )
        self.session.add(question)
        self.session.flush()
        return question

    def add_question_comment(
        self,
        *,
        question_id: int,
        html_body: str,
        user_id: int,
        comment_id: int | None = None,
    ) -> QuestionComment:
        """Insert a comment on a question."""
        comment = QuestionComment(
            id=comment_id,
            question_id=question_id,
            html_body=html_body,
            user_id=user_id,
        )
        self.session.add(comment)
        self.session.flush()
        return comment

    def add_answer(
        self,
        *,
        question_id: int,
        html_body: str,
        text_body: str,
        creation: datetime.datetime,
        score: int,
        user_id: int,
        accepted: bool,
        answer_id: int | None = None,
    ) -> Answer:
        """Insert an answer to a question."""
        answer = Answer(
            id=answer_id,
            question_id=question_id,
            html_body=html_body,
            text_body=text_body,
            creation=creation,
            score=score,
            user_id=user_id,
            accepted=accepted,
        )
        self.session.add(answer)
        self.session.flush()
        return answer

    def add_answer_comment(
        self,
        *,
        answer_id: int,
        html_body: str,
        user_id: int,
        comment_id: int | None = None,
    ) -> AnswerComment:
        """Insert a comment on an answer."""
        comment = AnswerComment(
            id=comment_id,
            answer_id=answer_id,
            html_body=html_body,
            user_id=user_id,
        )
        self.session.add(comment)
        self.session.flush()
        return comment

    def advance_id_sequences(self) -> None:
        """Move identity sequences past ids written explicitly; no-op off PostgreSQL."""
        if self.session.get_bind().dialect.name != "postgresql":
            return
        for stmt in id_sequence_updates():
            self.session.execute(stmt)
