"""Tests for the full-text search endpoint."""

from fastapi import status

from qa_service.models import User
from tests.factories import ALICE, BOB, CAROL, question


def test_search_returns_only_matching_question(client, ingest) -> None:
    ingest(
        [
            question(1, ALICE, title="one", body="<p>How do I sort a dictionary?</p>"),
            question(2, BOB, title="two", body="<p>Parsing <b>zebrafish</b> data</p>"),
            question(3, CAROL, title="three", body="<p>Another topic</p>"),
        ]
    )

    response = client.get("/api/v1/search", params={"q": "zebrafish"})

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert [q["id"] for q in data] == [2]
    assert data[0]["preview"] == "Parsing zebrafish data"
    assert data[0]["user_name"] == "Bob"


def test_search_orders_by_relevance(client, ingest) -> None:
    ingest(
        [
            question(1, ALICE, body="<p>python once</p>", creation=1600000000),
            question(2, BOB, body="<p>python python python</p>", creation=1700000000),
        ]
    )

    data = client.get("/api/v1/search", params={"q": "python"}).json()

    assert [q["id"] for q in data] == [2, 1]


def test_search_hides_soft_deleted_authors(client, ingest, db_session) -> None:
    ingest([question(1, ALICE, body="<p>unique term</p>"), question(2, BOB, body="<p>unique term</p>")])
    db_session.get(User, BOB["id"]).deleted = True
    db_session.commit()

    search = client.get("/api/v1/search", params={"q": "unique"}).json()
    listing = client.get("/api/v1/questions").json()

    assert [q["id"] for q in search] == [1]
    assert [q["id"] for q in listing] == [1]


def test_search_does_not_match_titles(client, ingest) -> None:
    ingest([question(1, ALICE, title="giraffe", body="<p>body text</p>")])

    assert client.get("/api/v1/search", params={"q": "giraffe"}).json() == []


def test_search_requires_query(client) -> None:
    response = client.get("/api/v1/search")

    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_search_with_no_words_returns_nothing(client, ingest) -> None:
    ingest([question(1, ALICE)])

    assert client.get("/api/v1/search", params={"q": "  ?! "}).json() == []


def test_search_matches_whole_words(client, ingest) -> None:
    ingest(
        [
            question(1, ALICE, body="<p>Which resort is best?</p>"),
            question(2, BOB, body="<p>How to Sort a list</p>"),
        ]
    )

    data = client.get("/api/v1/search", params={"q": "sort"}).json()

    assert [q["id"] for q in data] == [2]
