"""Q&A content service: bulk ingestion, retrieval and full-text search."""

__version__ = "0.1.0"
