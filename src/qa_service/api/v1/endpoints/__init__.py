"""API endpoint modules for version 1."""

from .answers import router as answers_router
from .questions import router as questions_router
from .search import router as search_router
from .users import router as users_router

__all__ = [
    "answers_router",
    "questions_router",
    "search_router",
    "users_router",
]
