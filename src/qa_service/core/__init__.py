"""Core configuration for the Q&A service."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
