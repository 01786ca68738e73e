"""Read helpers for users."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from qa_service.models import User
from qa_service.services.errors import NotFoundError

__all__ = ["get_user", "list_users"]


def list_users(db: Session) -> list[User]:
    """Return all users that are not soft-deleted."""
    return list(db.scalars(select(User).where(User.deleted.is_(False))))


def get_user(db: Session, user_id: int) -> User:
    """Return a single non-deleted user by primary key."""
    user = db.scalars(select(User).where(User.id == user_id, User.deleted.is_(False))).first()
    if user is None:
        raise NotFoundError("User", user_id)
    return user
