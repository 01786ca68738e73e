"""Structural types for the bulk ingestion document.

The source file is a JSON array of questions; each question nests its author,
its comments and its answers, and each answer nests its own author and
comments.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError


class DocumentFormatError(ValueError):
    """Raised when an ingestion document does not have the expected shape."""


class DocumentUser(BaseModel):
    """Author reference embedded in every post."""

    model_config = ConfigDict(extra="ignore")

    id: int
    name: str


class DocumentComment(BaseModel):
    """Comment on a question or an answer."""

    model_config = ConfigDict(extra="ignore")

    id: int
    body: str
    user: DocumentUser


class DocumentAnswer(BaseModel):
    """Answer with its nested comments."""

    model_config = ConfigDict(extra="ignore")

    id: int
    body: str
    creation: float
    score: int
    accepted: bool
    user: DocumentUser
    comments: list[DocumentComment]


class DocumentQuestion(BaseModel):
    """Top-level question with its comments and answers."""

    model_config = ConfigDict(extra="ignore")

    id: int
    title: str
    body: str
    creation: float
    score: int
    user: DocumentUser
    comments: list[DocumentComment]
    answers: list[DocumentAnswer]


_documents_adapter: TypeAdapter[list[DocumentQuestion]] = TypeAdapter(list[DocumentQuestion])


def _format_location(loc: tuple[Any, ...]) -> str:
    parts = []
    for item in loc:
        parts.append(f"[{item}]" if isinstance(item, int) else f".{item}")
    return "".join(parts) or "<root>"


def parse_documents(raw: Any) -> list[DocumentQuestion]:
    """Validate decoded JSON against the nested question shape.

    Raises:
        DocumentFormatError: If the structure is invalid. The message names the
            first offending location, e.g. ``[3].answers[0].user.id``.
    """
    try:
        return _documents_adapter.validate_python(raw)
    except ValidationError as err:
        first = err.errors()[0]
        raise DocumentFormatError(
            f"Invalid ingestion document at {_format_location(first['loc'])}: {first['msg']}"
            f" ({err.error_count()} error(s) in total)"
        ) from err


def load_documents(path: str | Path) -> list[DocumentQuestion]:
    """Read and validate an ingestion file."""
    with open(path, encoding="utf-8") as handle:
        try:
            raw = json.load(handle)
        except json.JSONDecodeError as err:
            raise DocumentFormatError(f"Data file '{path}' is not valid JSON: {err}") from err
    return parse_documents(raw)
