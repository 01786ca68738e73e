"""Full-text search endpoint."""

from typing import Annotated

from fastapi import APIRouter, Query

from qa_service.api.v1.dependencies import SessionDep
from qa_service.schemas.question import QuestionSummary
from qa_service.services.search import search_questions

router = APIRouter(prefix="/search", tags=["search"])


@router.get("", response_model=list[QuestionSummary])
async def search(
    db: SessionDep,
    q: Annotated[str, Query(description="Free-text query")],
) -> list[QuestionSummary]:
    """Rank questions against ``q``, most relevant first.

    Only question bodies are searched; titles and comments are not indexed.
    """
    return search_questions(db, q)
