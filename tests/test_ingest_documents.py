"""Tests for validating and loading ingestion documents."""

import json

import pytest

from qa_service.schemas.ingest import DocumentFormatError, load_documents, parse_documents
from tests.factories import ALICE, BOB, answer, comment, question


def test_parse_nested_documents() -> None:
    raw = [
        question(
            10,
            ALICE,
            comments=[comment(100, BOB)],
            answers=[answer(20, BOB, accepted=True, comments=[comment(200, ALICE)])],
        )
    ]

    documents = parse_documents(raw)

    assert len(documents) == 1
    doc = documents[0]
    assert doc.id == 10
    assert doc.user.name == "Alice"
    assert doc.comments[0].user.id == 2
    assert doc.answers[0].accepted is True
    assert doc.answers[0].comments[0].id == 200


def test_missing_field_names_location() -> None:
    raw = [question(10, ALICE, answers=[answer(20, BOB)])]
    del raw[0]["answers"][0]["user"]["id"]

    with pytest.raises(DocumentFormatError) as exc_info:
        parse_documents(raw)

    assert "[0].answers[0].user.id" in str(exc_info.value)


def test_top_level_must_be_a_list() -> None:
    with pytest.raises(DocumentFormatError):
        parse_documents({"questions": []})


def test_comments_list_is_required() -> None:
    raw = [question(10, ALICE)]
    del raw[0]["comments"]

    with pytest.raises(DocumentFormatError) as exc_info:
        parse_documents(raw)

    assert "comments" in str(exc_info.value)


def test_load_documents_reads_file(tmp_path) -> None:
    path = tmp_path / "data.json"
    path.write_text(json.dumps([question(1, ALICE)]), encoding="utf-8")

    documents = load_documents(path)

    assert [d.id for d in documents] == [1]


def test_load_documents_rejects_invalid_json(tmp_path) -> None:
    path = tmp_path / "data.json"
    path.write_text("[{", encoding="utf-8")

    with pytest.raises(DocumentFormatError):
        load_documents(path)
