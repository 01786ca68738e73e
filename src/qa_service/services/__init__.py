"""Business logic services for the Q&A application."""

from .errors import NotFoundError
from .ingestion import IngestionError, IngestionPipeline, IngestionStats

__all__ = [
    "IngestionError",
    "IngestionPipeline",
    "IngestionStats",
    "NotFoundError",
]
