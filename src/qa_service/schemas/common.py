"""Shared Pydantic types for common API elements."""
from __future__ import annotations

import datetime
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, Field, PlainSerializer

from qa_service.db.time import to_epoch_seconds

# Path and body identifiers: 1 to 18 decimal digits.
ID_PATTERN = r"^[0-9]{1,18}$"


def _id_as_text(value: object) -> object:
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


# Accepts ``"12"`` or ``12``; anything else fails the pattern.
UserIdField = Annotated[str, BeforeValidator(_id_as_text), Field(pattern=ID_PATTERN)]

EpochSeconds = Annotated[datetime.datetime, PlainSerializer(to_epoch_seconds, return_type=int)]


class CreatedResponse(BaseModel):
    """Identifier assigned by the store to a newly created record."""

    id: int = Field(..., description="Generated identifier.")
