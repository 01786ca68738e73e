"""Time utilities for database models."""

from datetime import UTC, datetime


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(UTC)


def from_epoch_seconds(seconds: float) -> datetime:
    """Return the UTC datetime for a Unix timestamp."""
    return datetime.fromtimestamp(seconds, UTC)


def to_epoch_seconds(value: datetime) -> int:
    """Return whole Unix seconds; naive values are taken to be UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return int(value.timestamp())
