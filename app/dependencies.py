"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

The chain for every request is:

    get_db()  →  Session (one per request, closed afterwards)
        ↓
    get_author_service() / get_book_service()  →  service bound to that Session
        ↓
    route handler

Tests replace get_db through app.dependency_overrides, and every service
built for the request then uses the test session.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.services import AuthorService, BookService

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
# Instead of writing:
#   def get_authors(service: AuthorService = Depends(get_author_service)):
#
# You can write:
#   def get_authors(service: AuthorServiceDep):

DbSession = Annotated[Session, Depends(get_db)]


def get_author_service(db: DbSession) -> AuthorService:
    """Build an AuthorService bound to the request's session."""
    return AuthorService(db)


def get_book_service(db: DbSession) -> BookService:
    """Build a BookService bound to the request's session."""
    return BookService(db)


AuthorServiceDep = Annotated[AuthorService, Depends(get_author_service)]
BookServiceDep = Annotated[BookService, Depends(get_book_service)]
