"""Question endpoints, including a question's comments and answers."""

from fastapi import APIRouter, HTTPException, status

from qa_service.api.v1.dependencies import IdPath, SessionDep
from qa_service.schemas.answer import AnswerCreate, AnswerSummary
from qa_service.schemas.common import CreatedResponse
from qa_service.schemas.question import (
    CommentCreate,
    CommentResponse,
    QuestionCreate,
    QuestionDetail,
    QuestionSummary,
)
from qa_service.services import questions as question_service
from qa_service.services.errors import NotFoundError

router = APIRouter(prefix="/questions", tags=["questions"])


def _not_found(err: NotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(err))


@router.get("", response_model=list[QuestionSummary])
async def list_questions(db: SessionDep) -> list[QuestionSummary]:
    """List all questions, oldest first, with a plain-text preview."""
    return question_service.list_questions(db)


@router.post("", response_model=CreatedResponse)
async def create_question(data: QuestionCreate, db: SessionDep) -> CreatedResponse:
    """Create a new question and return its ID.

    Raises:
        HTTPException: 404 if ``userId`` does not name an active user.
    """
    try:
        question_id = question_service.create_question(db, data)
    except NotFoundError as err:
        raise _not_found(err) from err
    return CreatedResponse(id=question_id)


@router.get("/{question_id}", response_model=QuestionDetail)
async def get_question(question_id: IdPath, db: SessionDep) -> QuestionDetail:
    """Get one question including its full HTML body."""
    try:
        return question_service.get_question(db, int(question_id))
    except NotFoundError as err:
        raise _not_found(err) from err


@router.get("/{question_id}/comments", response_model=list[CommentResponse])
async def list_question_comments(question_id: IdPath, db: SessionDep) -> list[CommentResponse]:
    """Get all comments on a question."""
    try:
        return question_service.list_question_comments(db, int(question_id))
    except NotFoundError as err:
        raise _not_found(err) from err


@router.post("/{question_id}/comments", response_model=CreatedResponse)
async def create_question_comment(
    question_id: IdPath,
    data: CommentCreate,
    db: SessionDep,
) -> CreatedResponse:
    """Post a comment on a question and return its ID."""
    try:
        comment_id = question_service.create_question_comment(db, int(question_id), data)
    except NotFoundError as err:
        raise _not_found(err) from err
    return CreatedResponse(id=comment_id)


@router.get("/{question_id}/answers", response_model=list[AnswerSummary])
async def list_question_answers(question_id: IdPath, db: SessionDep) -> list[AnswerSummary]:
    """Get a question's answers: accepted first, then by descending score."""
    try:
        return question_service.list_question_answers(db, int(question_id))
    except NotFoundError as err:
        raise _not_found(err) from err


@router.post("/{question_id}/answers", response_model=CreatedResponse)
async def create_answer(
    question_id: IdPath,
    data: AnswerCreate,
    db: SessionDep,
) -> CreatedResponse:
    """Post a new answer to a question and return its ID."""
    try:
        answer_id = question_service.create_answer(db, int(question_id), data)
    except NotFoundError as err:
        raise _not_found(err) from err
    return CreatedResponse(id=answer_id)
