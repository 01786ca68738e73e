"""Tests for the bulk ingestion pipeline."""

import pytest
from sqlalchemy import func, select

from qa_service.models import Answer, AnswerComment, Question, QuestionComment, User
from qa_service.repositories.entity_store import EntityStore
from qa_service.schemas.ingest import parse_documents
from qa_service.services.ingestion import IngestionError, IngestionPipeline
from tests.factories import ALICE, BOB, CAROL, answer, comment, question


def _count(db_session, model) -> int:
    return db_session.scalar(select(func.count()).select_from(model))


def test_ingests_full_graph(ingest, db_session) -> None:
    stats = ingest(
        [
            question(
                5,
                ALICE,
                body="<p>Hello &amp; welcome</p>\n",
                comments=[comment(50, BOB)],
                answers=[
                    answer(
                        6,
                        CAROL,
                        body="<b>Use</b> a loop",
                        accepted=True,
                        comments=[comment(60, ALICE)],
                    )
                ],
            )
        ]
    )

    assert stats.questions == 1
    assert stats.question_comments == 1
    assert stats.answers == 1
    assert stats.answer_comments == 1
    assert stats.users_inserted == 3
    assert stats.users_existing == 1

    stored = db_session.get(Question, 5)
    assert stored.text_body == "Hello & welcome "
    assert stored.html_body == "<p>Hello &amp; welcome</p>\n"
    assert stored.user_id == 1
    assert db_session.get(QuestionComment, 50).question_id == 5
    stored_answer = db_session.get(Answer, 6)
    assert stored_answer.text_body == "Use a loop"
    assert stored_answer.accepted is True
    assert db_session.get(AnswerComment, 60).answer_id == 6


def test_first_seen_user_name_wins(ingest, db_session) -> None:
    renamed = {"id": ALICE["id"], "name": "Alicia"}
    ingest([question(1, ALICE), question(2, renamed)])

    users = db_session.scalars(select(User)).all()
    assert [(u.id, u.name) for u in users] == [(1, "Alice")]


def test_reingesting_users_does_not_duplicate_them(ingest, db_session) -> None:
    ingest([question(1, ALICE, answers=[answer(11, BOB)])])
    stats = ingest([question(2, ALICE, answers=[answer(12, BOB)])])

    assert stats.users_inserted == 0
    assert stats.users_existing == 2
    assert _count(db_session, User) == 2


def test_duplicate_question_id_aborts_run(ingest, db_session) -> None:
    ingest([question(1, ALICE)])

    with pytest.raises(IngestionError) as exc_info:
        ingest([question(2, BOB), question(1, CAROL), question(3, CAROL)])

    assert exc_info.value.question_id == 1
    # Earlier questions stay committed; the failing one and later ones are not stored.
    assert db_session.get(Question, 2) is not None
    assert db_session.get(Question, 3) is None
    assert db_session.get(User, 3) is None


def test_failure_rolls_back_whole_question(ingest, db_session) -> None:
    ingest([question(1, ALICE, comments=[comment(100, ALICE)])])

    with pytest.raises(IngestionError):
        ingest(
            [
                question(
                    2,
                    BOB,
                    answers=[answer(20, CAROL)],
                    comments=[comment(100, BOB)],
                )
            ]
        )

    assert db_session.get(Question, 2) is None
    assert db_session.get(User, 2) is None
    assert _count(db_session, QuestionComment) == 1


def test_skip_existing_makes_reingestion_idempotent(ingest, db_session) -> None:
    corpus = [question(1, ALICE, comments=[comment(10, BOB)], answers=[answer(20, BOB)])]
    ingest(corpus)

    stats = ingest(corpus, skip_existing=True)

    assert stats.questions == 0
    assert stats.questions_skipped == 1
    assert _count(db_session, Question) == 1
    assert _count(db_session, QuestionComment) == 1
    assert _count(db_session, Answer) == 1


def test_writes_in_dependency_order(database, monkeypatch) -> None:
    calls: list[tuple[str, int]] = []

    class RecordingStore(EntityStore):
        def ensure_user(self, user_id, name):
            calls.append(("user", user_id))
            return super().ensure_user(user_id, name)

        def add_question(self, **kwargs):
            calls.append(("question", kwargs["question_id"]))
            return super().add_question(**kwargs)

        def add_question_comment(self, **kwargs):
            calls.append(("question_comment", kwargs["comment_id"]))
            return super().add_question_comment(**kwargs)

        def add_answer(self, **kwargs):
            calls.append(("answer", kwargs["answer_id"]))
            return super().add_answer(**kwargs)

        def add_answer_comment(self, **kwargs):
            calls.append(("answer_comment", kwargs["comment_id"]))
            return super().add_answer_comment(**kwargs)

    monkeypatch.setattr("qa_service.services.ingestion.EntityStore", RecordingStore)
    documents = parse_documents(
        [
            question(
                1,
                ALICE,
                comments=[comment(10, BOB)],
                answers=[answer(20, CAROL, comments=[comment(30, BOB)])],
            ),
            question(2, BOB),
        ]
    )

    IngestionPipeline(database.session_factory).run(documents)

    assert calls == [
        ("user", 1),
        ("question", 1),
        ("user", 2),
        ("question_comment", 10),
        ("user", 3),
        ("answer", 20),
        ("user", 2),
        ("answer_comment", 30),
        ("user", 2),
        ("question", 2),
    ]
