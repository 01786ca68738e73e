"""Exceptions raised by the service layer."""
from __future__ import annotations


class NotFoundError(LookupError):
    """Requested record is absent or its author is soft-deleted."""

    def __init__(self, resource: str, record_id: int) -> None:
        super().__init__(f"{resource} ID {record_id} not found")
        self.resource = resource
        self.record_id = record_id
