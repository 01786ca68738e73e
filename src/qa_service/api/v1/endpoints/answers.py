"""Answer endpoints."""

from fastapi import APIRouter, HTTPException, status

from qa_service.api.v1.dependencies import IdPath, SessionDep
from qa_service.schemas.answer import AnswerDetail, AnswerListItem
from qa_service.schemas.question import CommentResponse
from qa_service.services import answers as answer_service
from qa_service.services.errors import NotFoundError

router = APIRouter(prefix="/answers", tags=["answers"])


@router.get("", response_model=list[AnswerListItem])
async def list_answers(db: SessionDep) -> list[AnswerListItem]:
    """List all answers, oldest first, with a plain-text preview."""
    return answer_service.list_answers(db)


@router.get("/{answer_id}", response_model=AnswerDetail)
async def get_answer(answer_id: IdPath, db: SessionDep) -> AnswerDetail:
    """Get one answer including its full HTML body."""
    try:
        return answer_service.get_answer(db, int(answer_id))
    except NotFoundError as err:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err)) from err


@router.get("/{answer_id}/comments", response_model=list[CommentResponse])
async def list_answer_comments(answer_id: IdPath, db: SessionDep) -> list[CommentResponse]:
    """Get all comments on an answer."""
    try:
        return answer_service.list_answer_comments(db, int(answer_id))
    except NotFoundError as err:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err)) from err
