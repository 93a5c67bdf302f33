"""
Book Pydantic Schemas

Books carry a single author reference (author_id). Responses embed the
author so clients don't need a second request.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.author import AuthorResponse


class BookBase(BaseModel):
    """Base schema with shared book fields."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Book title",
        examples=["Dom Casmurro", "Memórias Póstumas de Brás Cubas"],
    )

    author_id: int = Field(
        ...,
        description="ID of the author who wrote the book",
        examples=[1],
    )

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize title."""
        if not v.strip():
            raise ValueError("Title cannot be empty or whitespace")
        return v.strip()


class BookCreate(BookBase):
    """
    Schema for creating a new book.

    The referenced author must already exist.

    Example request body:
    {
        "title": "Dom Casmurro",
        "author_id": 1
    }
    """
    pass


class BookEdit(BookBase):
    """
    Schema for editing an existing book.

    Both fields are required. Pointing author_id at another existing author
    moves the book to that author.
    """
    pass


class BookResponse(BaseModel):
    """
    Schema for book responses.

    Doesn't inherit BookBase: the title rules apply to input only.
    """

    id: int = Field(
        ...,
        description="Unique identifier",
        examples=[1],
    )

    title: str
    author_id: int

    author: AuthorResponse = Field(
        ...,
        description="The author who wrote the book",
    )

    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
