"""
Response Envelope Schema

Every service operation returns the same wrapper:

    {
        "status": true,
        "message": "Authors listed successfully!",
        "data": [...]
    }

- status: False when the operation could not be carried out (record not
  found, invalid author reference). These are normal outcomes, not errors.
- message: Human-readable outcome; always set on failure.
- data: A single entity, a list of entities, or null.

ResponseModel is generic so FastAPI can document the payload type:
    response_model=ResponseModel[AuthorResponse]
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ResponseModel(BaseModel, Generic[T]):
    """Envelope returned by AuthorService and BookService."""

    status: bool = Field(
        default=True,
        description="Whether the operation succeeded",
    )

    message: str = Field(
        default="",
        description="Human-readable outcome message",
        examples=["No record found!"],
    )

    data: T | None = Field(
        default=None,
        description="Operation payload: an entity, a list of entities, or null",
    )

    @classmethod
    def fail(cls, message: str) -> "ResponseModel[T]":
        """Build a failed envelope with no payload."""
        return cls(status=False, message=message, data=None)
