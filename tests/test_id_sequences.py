"""Tests for moving identity sequences past explicitly inserted ids."""

from types import SimpleNamespace

import pytest
from sqlalchemy.dialects import postgresql

from qa_service.repositories.entity_store import EntityStore, id_sequence_updates
from qa_service.schemas.ingest import parse_documents
from qa_service.services.ingestion import IngestionError, IngestionPipeline
from tests.factories import ALICE, question


class _RecordingSession:
    def __init__(self, dialect_name: str) -> None:
        self.dialect_name = dialect_name
        self.executed: list = []

    def get_bind(self):
        return SimpleNamespace(dialect=SimpleNamespace(name=self.dialect_name))

    def execute(self, stmt) -> None:
        self.executed.append(stmt)


def test_updates_cover_every_generated_id_table() -> None:
    compiled = [stmt.compile(dialect=postgresql.dialect()) for stmt in id_sequence_updates()]

    tables = [next(v for v in c.params.values() if v != "id" and isinstance(v, str)) for c in compiled]
    assert tables == ["questions", "q_comments", "answers", "a_comments"]
    for table, c in zip(tables, compiled):
        sql = str(c)
        assert sql.startswith("SELECT setval(pg_get_serial_sequence(")
        assert f"coalesce(max({table}.id), " in sql
        assert f"FROM {table}" in sql


def test_advance_runs_updates_on_postgres() -> None:
    session = _RecordingSession("postgresql")

    EntityStore(session).advance_id_sequences()

    assert len(session.executed) == 4


def test_advance_is_a_no_op_elsewhere() -> None:
    session = _RecordingSession("sqlite")

    EntityStore(session).advance_id_sequences()

    assert session.executed == []


def test_pipeline_advances_sequences_after_run(database, monkeypatch) -> None:
    calls: list[str] = []
    monkeypatch.setattr(EntityStore, "advance_id_sequences", lambda self: calls.append("advance"))

    IngestionPipeline(database.session_factory).run(parse_documents([question(1, ALICE)]))

    assert calls == ["advance"]


def test_pipeline_failure_leaves_sequences_alone(database, monkeypatch) -> None:
    calls: list[str] = []
    monkeypatch.setattr(EntityStore, "advance_id_sequences", lambda self: calls.append("advance"))
    documents = parse_documents([question(1, ALICE), question(1, ALICE)])

    with pytest.raises(IngestionError):
        IngestionPipeline(database.session_factory).run(documents)

    assert calls == []


def test_created_question_does_not_reuse_ingested_id(client, ingest) -> None:
    ingest([question(1, ALICE), question(2, ALICE)])

    response = client.post("/api/v1/questions", json={"title": "New", "body": "<p>b</p>", "userId": "1"})

    assert response.status_code == 200
    assert response.json()["id"] not in (1, 2)
