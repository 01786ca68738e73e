"""Data access helpers for the relational store."""

from .entity_store import EntityStore, id_sequence_updates
from .search import TextMatch, text_match

__all__ = ["EntityStore", "TextMatch", "id_sequence_updates", "text_match"]
