"""
Services Package

This package contains business logic services that are:
- Separate from HTTP handling (routers)
- Constructed with the database session they work on
- Easier to test in isolation

Current services:
- author_service.py: AuthorService, author CRUD
- book_service.py: BookService, book CRUD with author reference checks
- messages.py: Outcome messages used in the response envelope
"""

from app.services.author_service import AuthorService
from app.services.book_service import BookService

__all__ = [
    "AuthorService",
    "BookService",
]
