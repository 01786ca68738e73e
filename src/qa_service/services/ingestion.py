"""Bulk ingestion of the nested question corpus into the relational store.

Each question is written depth-first in dependency order: its author, the
question, each comment (author first), then each answer (author, answer,
then each answer comment with its author). Comments and answers reference
both their parent and their author, so the order cannot change.

One question and all of its descendants form one transaction. A failure
rolls that question back and aborts the run; questions committed earlier
stay committed. After a complete run the id sequences are moved past the
ingested ids so that ids generated later do not collide with them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from qa_service.db.time import from_epoch_seconds
from qa_service.repositories.entity_store import EntityStore
from qa_service.schemas.ingest import DocumentAnswer, DocumentComment, DocumentQuestion, DocumentUser
from qa_service.utils.html import html_to_plain_text

# Configure logger for this module
logger = logging.getLogger(__name__)


class IngestionError(RuntimeError):
    """Raised when a record cannot be stored; the run is aborted."""

    def __init__(self, question_id: int, cause: Exception) -> None:
        super().__init__(f"Failed to ingest question {question_id}: {cause}")
        self.question_id = question_id


@dataclass
class IngestionStats:
    """Counters reported at the end of a run."""

    questions: int = 0
    question_comments: int = 0
    answers: int = 0
    answer_comments: int = 0
    users_inserted: int = 0
    users_existing: int = 0
    questions_skipped: int = 0


class IngestionPipeline:
    """Materialize ingestion documents through :class:`EntityStore`.

    Args:
        session_factory: Factory producing sessions bound to the target store.
        skip_existing: Skip questions whose id is already stored, together
            with all their descendants. Off by default, in which case a
            repeated question id is a constraint violation.
    """

    def __init__(self, session_factory: sessionmaker[Session], *, skip_existing: bool = False) -> None:
        self.session_factory = session_factory
        self.skip_existing = skip_existing

    def run(self, documents: Iterable[DocumentQuestion]) -> IngestionStats:
        """Ingest every question in order, stopping at the first failure.

        Raises:
            IngestionError: If the store rejects a record.
        """
        stats = IngestionStats()
        for document in documents:
            with self.session_factory() as session:
                try:
                    with session.begin():
                        self._ingest_question(EntityStore(session), document, stats)
                except SQLAlchemyError as err:
                    logger.error("Aborting ingestion at question %s: %s", document.id, err)
                    raise IngestionError(document.id, err) from err
        with self.session_factory() as session, session.begin():
            EntityStore(session).advance_id_sequences()
        logger.info(
            "Ingested %d questions, %d answers, %d comments; %d new users",
            stats.questions,
            stats.answers,
            stats.question_comments + stats.answer_comments,
            stats.users_inserted,
        )
        return stats

    def _ingest_question(self, store: EntityStore, document: DocumentQuestion, stats: IngestionStats) -> None:
        if self.skip_existing and store.question_exists(document.id):
            logger.debug("Question %s already stored; skipping", document.id)
            stats.questions_skipped += 1
            return

        logger.debug("Ingesting question %s", document.id)
        self._ensure_user(store, document.user, stats)
        store.add_question(
            question_id=document.id,
            title=document.title,
            html_body=document.body,
            text_body=html_to_plain_text(document.body),
            creation=from_epoch_seconds(document.creation),
            score=document.score,
            user_id=document.user.id,
        )
        stats.questions += 1

        for comment in document.comments:
            self._ensure_user(store, comment.user, stats)
            store.add_question_comment(
                comment_id=comment.id,
                question_id=document.id,
                html_body=comment.body,
                user_id=comment.user.id,
            )
            stats.question_comments += 1

        for answer in document.answers:
            self._ingest_answer(store, document.id, answer, stats)

    def _ingest_answer(
        self,
        store: EntityStore,
        question_id: int,
        answer: DocumentAnswer,
        stats: IngestionStats,
    ) -> None:
        self._ensure_user(store, answer.user, stats)
        store.add_answer(
            answer_id=answer.id,
            question_id=question_id,
            html_body=answer.body,
            text_body=html_to_plain_text(answer.body),
            creation=from_epoch_seconds(answer.creation),
            score=answer.score,
            user_id=answer.user.id,
            accepted=answer.accepted,
        )
        stats.answers += 1

        for comment in answer.comments:
            self._ingest_answer_comment(store, answer.id, comment, stats)

    def _ingest_answer_comment(
        self,
        store: EntityStore,
        answer_id: int,
        comment: DocumentComment,
        stats: IngestionStats,
    ) -> None:
        self._ensure_user(store, comment.user, stats)
        store.add_answer_comment(
            comment_id=comment.id,
            answer_id=answer_id,
            html_body=comment.body,
            user_id=comment.user.id,
        )
        stats.answer_comments += 1

    @staticmethod
    def _ensure_user(store: EntityStore, user: DocumentUser, stats: IngestionStats) -> None:
        if store.ensure_user(user.id, user.name):
            stats.users_inserted += 1
        else:
            stats.users_existing += 1
