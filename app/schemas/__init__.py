"""
Pydantic Schemas Package

This package contains Pydantic models for request/response validation.

Schema Naming Convention:
- XxxBase: Shared fields
- XxxCreate: Fields required when creating a new record
- XxxEdit: Fields accepted when editing a record
- XxxResponse: Fields returned in API responses
- ResponseModel[T]: The {status, message, data} envelope wrapping every result
"""

from app.schemas.author import (
    AuthorBase,
    AuthorCreate,
    AuthorEdit,
    AuthorResponse,
)
from app.schemas.book import (
    BookBase,
    BookCreate,
    BookEdit,
    BookResponse,
)
from app.schemas.response import ResponseModel

__all__ = [
    # Author schemas
    "AuthorBase",
    "AuthorCreate",
    "AuthorEdit",
    "AuthorResponse",
    # Book schemas
    "BookBase",
    "BookCreate",
    "BookEdit",
    "BookResponse",
    # Envelope
    "ResponseModel",
]
