"""Shared API dependencies and parameter types."""

from typing import Annotated

from fastapi import Depends, Path
from sqlalchemy.orm import Session

from qa_service.db.session import get_db
from qa_service.schemas.common import ID_PATTERN

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]

# Path identifiers are validated as text so that a malformed id is a 400, not a 404.
IdPath = Annotated[str, Path(pattern=ID_PATTERN, description="Numeric record ID (1-18 digits)")]
