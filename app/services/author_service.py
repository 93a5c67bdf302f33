"""
Author Service

Create, read, update and delete operations for authors.

Every method returns a ResponseModel envelope. A missing record is a normal
outcome reported as status=False with the NOT_FOUND message. Database errors
(SQLAlchemyError) are not caught here; they propagate to the caller.

The service works on the Session it is given. It never opens a session of
its own, so each request (or test) decides which database it talks to.
"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from app.models import Author, Book
from app.schemas import AuthorCreate, AuthorEdit, AuthorResponse, ResponseModel
from app.services import messages

logger = logging.getLogger(__name__)


class AuthorService:
    """
    Author CRUD over an injected SQLAlchemy session.

    Usage:
        service = AuthorService(db)
        result = service.get_author_by_id(1)
        if result.status:
            print(result.data.first_name)
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------
    def get_author_by_id(self, author_id: int) -> ResponseModel[AuthorResponse]:
        """
        Find an author by ID.

        Args:
            author_id: ID of the author to find

        Returns:
            Envelope with the author, or the not-found envelope
        """
        author = self.db.get(Author, author_id)
        if author is None:
            logger.debug(f"Author {author_id} not found")
            return ResponseModel[AuthorResponse].fail(messages.NOT_FOUND)

        return ResponseModel[AuthorResponse](
            data=AuthorResponse.model_validate(author),
            message=messages.AUTHOR_FOUND,
        )

    def get_author_by_book_id(self, book_id: int) -> ResponseModel[AuthorResponse]:
        """
        Find the author who wrote a given book.

        Args:
            book_id: ID of the book whose author is wanted

        Returns:
            Envelope with the author, or the not-found envelope when the
            book doesn't exist
        """
        stmt = (
            select(Book)
            .options(selectinload(Book.author))
            .where(Book.id == book_id)
        )
        book = self.db.execute(stmt).scalar_one_or_none()
        if book is None:
            logger.debug(f"Book {book_id} not found while looking up its author")
            return ResponseModel[AuthorResponse].fail(messages.NOT_FOUND)

        return ResponseModel[AuthorResponse](
            data=AuthorResponse.model_validate(book.author),
            message=messages.AUTHOR_FOUND,
        )

    def list_authors(self) -> ResponseModel[list[AuthorResponse]]:
        """List all authors in insertion (ID) order. An empty list is a success."""
        return ResponseModel[list[AuthorResponse]](
            data=self._all_authors(),
            message=messages.AUTHORS_LISTED,
        )

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------
    def create_author(self, author_data: AuthorCreate) -> ResponseModel[list[AuthorResponse]]:
        """
        Create a new author.

        Returns:
            Envelope with the full, updated list of authors
        """
        author = Author(
            first_name=author_data.first_name,
            last_name=author_data.last_name,
        )
        self.db.add(author)
        self.db.commit()

        logger.info(f"Created author {author.id}: {author.first_name} {author.last_name}")

        return ResponseModel[list[AuthorResponse]](
            data=self._all_authors(),
            message=messages.AUTHOR_CREATED,
        )

    def edit_author(
        self,
        author_id: int,
        author_data: AuthorEdit,
    ) -> ResponseModel[list[AuthorResponse]]:
        """
        Replace the name of an existing author.

        Only the matched author is touched.

        Returns:
            Envelope with the updated list of authors, or the not-found envelope
        """
        author = self.db.get(Author, author_id)
        if author is None:
            logger.debug(f"Author {author_id} not found for edit")
            return ResponseModel[list[AuthorResponse]].fail(messages.NOT_FOUND)

        author.first_name = author_data.first_name
        author.last_name = author_data.last_name
        self.db.commit()

        logger.info(f"Edited author {author_id}")

        return ResponseModel[list[AuthorResponse]](
            data=self._all_authors(),
            message=messages.AUTHOR_EDITED,
        )

    def delete_author(self, author_id: int) -> ResponseModel[list[AuthorResponse]]:
        """
        Delete an author.

        The author's books are deleted with it (see Author.books cascade).

        Returns:
            Envelope with the remaining authors, or the not-found envelope
        """
        author = self.db.get(Author, author_id)
        if author is None:
            logger.debug(f"Author {author_id} not found for delete")
            return ResponseModel[list[AuthorResponse]].fail(messages.NOT_FOUND)

        book_count = len(author.books)
        self.db.delete(author)
        self.db.commit()

        logger.info(f"Deleted author {author_id} and {book_count} book(s)")

        return ResponseModel[list[AuthorResponse]](
            data=self._all_authors(),
            message=messages.AUTHOR_DELETED,
        )

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------
    def _all_authors(self) -> list[AuthorResponse]:
        stmt = select(Author).order_by(Author.id)
        authors = self.db.execute(stmt).scalars().all()
        return [AuthorResponse.model_validate(a) for a in authors]
