"""User-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict


class UserResponse(BaseModel):
    """Public user projection; soft-deleted users are never returned."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
