"""
Book Model

Represents a book in the library database.

Each book belongs to exactly one author through the author_id foreign key.
A book cannot be stored without a valid author reference; BookService checks
the reference before inserting or editing, and the NOT NULL foreign key
backs that up at the database level.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.author import Author


class Book(Base):
    """
    Book model.

    Table: books

    Relationships:
    - author: Many-to-One back to Author

    Indexes:
    - title: For searching books by title
    - author_id: For listing the books of an author
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True)

    title: Mapped[str] = mapped_column(
        String(500),
        index=True,
        nullable=False,
        comment="Book title"
    )

    author_id: Mapped[int] = mapped_column(
        ForeignKey("authors.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
        comment="Author who wrote the book"
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="When the book record was created"
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
        comment="When the book record was last updated"
    )

    author: Mapped["Author"] = relationship(
        "Author",
        back_populates="books",
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', author_id={self.author_id})"
