"""
Author Pydantic Schemas

These schemas define the shape of data for Author-related API operations.

Pydantic v2 Features Used:
- model_config: Configure models (replaces Config class)
- Field(): Define constraints and metadata
- field_validator: Validate and transform field values
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AuthorBase(BaseModel):
    """
    Base schema with shared author fields.

    Contains fields common to create, edit, and response schemas.
    """

    first_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Author's first name",
        examples=["Machado", "Clarice"],
    )

    last_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Author's last name",
        examples=["de Assis", "Lispector"],
    )

    @field_validator("first_name", "last_name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        """
        Validate that a name part is not just whitespace.

        Raises:
            ValueError: If the value is blank
        """
        if not v.strip():
            raise ValueError("Name cannot be empty or whitespace")
        return v.strip()


class AuthorCreate(AuthorBase):
    """
    Schema for creating a new author.

    Example request body:
    {
        "first_name": "Machado",
        "last_name": "de Assis"
    }
    """
    pass


class AuthorEdit(AuthorBase):
    """
    Schema for editing an existing author.

    Both name parts are required; the author is matched by the id in the URL
    and its fields are replaced in place.
    """
    pass


class AuthorResponse(BaseModel):
    """
    Schema for author responses.

    from_attributes=True lets the schema be built straight from an
    Author ORM instance with AuthorResponse.model_validate(author).

    Fields are plain: input rules live on AuthorBase, and stored rows are
    returned as they are.
    """

    first_name: str = Field(..., description="Author's first name")
    last_name: str = Field(..., description="Author's last name")

    id: int = Field(
        ...,
        description="Unique identifier",
        examples=[1, 42],
    )

    created_at: datetime = Field(
        ...,
        description="When the author was created",
    )

    updated_at: datetime = Field(
        ...,
        description="When the author was last updated",
    )

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "first_name": "Machado",
                "last_name": "de Assis",
                "created_at": "2024-01-15T10:30:00Z",
                "updated_at": "2024-01-15T10:30:00Z",
            }
        },
    )
