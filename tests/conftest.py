# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite://")

from qa_service.db.session import Database
from qa_service.db.session import get_db as app_get_session
from qa_service.main import create_app
from qa_service.schemas.ingest import parse_documents
from qa_service.services.ingestion import IngestionPipeline, IngestionStats

TEST_DB_URL = "sqlite://"


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture()
def database(engine: Engine) -> Iterator[Database]:
    # Wrap before the first connection so the foreign-key pragma is applied.
    database = Database(engine)
    database.create_tables()
    try:
        yield database
    finally:
        database.drop_tables()


@pytest.fixture()
def db_session(database: Database) -> Iterator[Session]:
    session = database.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def app(database: Database) -> Iterator[FastAPI]:
    application = create_app()

    def _get_session_override() -> Generator[Session, None, None]:
        db = database.session_factory()
        try:
            yield db
        finally:
            db.close()

    application.dependency_overrides[app_get_session] = _get_session_override
    yield application
    application.dependency_overrides.clear()


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def ingest(database: Database) -> Callable[..., IngestionStats]:
    """Run the ingestion pipeline over raw (decoded JSON) documents."""

    def _ingest(raw: list[dict[str, Any]], **kwargs: Any) -> IngestionStats:
        return IngestionPipeline(database.session_factory, **kwargs).run(parse_documents(raw))

    return _ingest
