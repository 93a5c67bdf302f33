"""
Author Model

Represents an author in the library database.

SQLAlchemy 2.0 Features Used:
- mapped_column(): New way to define columns with full type support
- Mapped[]: Type hint wrapper for SQLAlchemy columns
- relationship(): One-to-many relationship to Book
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.book import Book


class Author(Base):
    """
    Author model representing writers in the system.

    Table: authors

    Relationships:
    - books: One-to-Many, every Book references exactly one Author.
      Deleting an author deletes the books that reference it.

    Example:
        author = Author(first_name="Machado", last_name="de Assis")
        db.add(author)
        db.commit()
    """

    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(primary_key=True)

    first_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Author's first name"
    )

    last_name: Mapped[str] = mapped_column(
        String(255),
        index=True,
        nullable=False,
        comment="Author's last name"
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="When the author record was created"
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
        comment="When the author record was last updated"
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    # cascade="all, delete-orphan" makes the ORM delete an author's books
    # together with the author, matching ondelete="CASCADE" on books.author_id.
    books: Mapped[list["Book"]] = relationship(
        "Book",
        back_populates="author",
        cascade="all, delete-orphan",
        order_by="Book.id",
    )

    def __repr__(self) -> str:
        return f"Author(id={self.id}, first_name='{self.first_name}', last_name='{self.last_name}')"
