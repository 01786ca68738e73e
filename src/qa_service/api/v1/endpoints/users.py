"""User endpoints."""

from fastapi import APIRouter, HTTPException, status

from qa_service.api.v1.dependencies import IdPath, SessionDep
from qa_service.models import User
from qa_service.schemas.user import UserResponse
from qa_service.services import users as user_service
from qa_service.services.errors import NotFoundError

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def list_users(db: SessionDep) -> list[User]:
    """List all users that are not deleted."""
    return user_service.list_users(db)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: IdPath, db: SessionDep) -> User:
    """Get a single user by user ID."""
    try:
        return user_service.get_user(db, int(user_id))
    except NotFoundError as err:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err)) from err
