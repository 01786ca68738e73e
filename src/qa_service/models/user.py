"""SQLAlchemy model for content authors."""

from __future__ import annotations

from sqlalchemy import BigInteger, Boolean, Integer, Text, false
from sqlalchemy.orm import Mapped, mapped_column

from qa_service.db.session import Base

# SQLite only auto-generates ids for INTEGER PRIMARY KEY columns.
Id64 = BigInteger().with_variant(Integer, "sqlite")


class User(Base):
    """Author of questions, answers and comments.

    Ids come from the source corpus. ``deleted`` is a soft-delete flag that
    every read path filters on.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Id64, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())
