"""Tests for answer endpoints."""

from fastapi import status

from qa_service.models import User
from tests.factories import ALICE, BOB, CAROL, answer, comment, question


def test_list_answers_across_questions(client, ingest, db_session) -> None:
    ingest(
        [
            question(1, ALICE, answers=[answer(20, BOB, creation=1700000300)]),
            question(2, ALICE, answers=[answer(21, ALICE, creation=1700000200), answer(22, CAROL)]),
        ]
    )
    db_session.get(User, CAROL["id"]).deleted = True
    db_session.commit()

    response = client.get("/api/v1/answers")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert [(a["id"], a["question_id"]) for a in data] == [(21, 2), (20, 1)]


def test_get_answer_detail(client, ingest) -> None:
    ingest([question(1, ALICE, answers=[answer(20, BOB, body="<p>x</p>", score=4, accepted=True)])])

    response = client.get("/api/v1/answers/20")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "id": 20,
        "question_id": 1,
        "body": "<p>x</p>",
        "creation": 1700000100,
        "score": 4,
        "user_id": 2,
        "user_name": "Bob",
        "accepted": True,
    }


def test_get_answer_not_found(client) -> None:
    response = client.get("/api/v1/answers/404")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "Answer ID 404 not found"


def test_get_answer_rejects_bad_id(client) -> None:
    response = client.get("/api/v1/answers/-1")

    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_list_answer_comments(client, ingest) -> None:
    ingest(
        [
            question(
                1,
                ALICE,
                answers=[answer(20, BOB, comments=[comment(30, CAROL, body="agreed")])],
            )
        ]
    )

    response = client.get("/api/v1/answers/20/comments")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == [{"id": 30, "body": "agreed", "user_id": 3, "user_name": "Carol"}]


def test_list_comments_for_missing_answer(client) -> None:
    response = client.get("/api/v1/answers/7/comments")

    assert response.status_code == status.HTTP_404_NOT_FOUND
