"""
Book Service

Create, read, update and delete operations for books.

Same envelope contract as AuthorService. Creating or editing a book also
checks that the referenced author exists; an unknown author_id is reported
as status=False with the AUTHOR_NOT_FOUND message and nothing is written.
"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from app.models import Author, Book
from app.schemas import BookCreate, BookEdit, BookResponse, ResponseModel
from app.services import messages

logger = logging.getLogger(__name__)


class BookService:
    """Book CRUD over an injected SQLAlchemy session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------
    def get_book_by_id(self, book_id: int) -> ResponseModel[BookResponse]:
        """
        Find a book by ID.

        Returns:
            Envelope with the book (author embedded), or the not-found envelope
        """
        stmt = self._select_books().where(Book.id == book_id)
        book = self.db.execute(stmt).scalar_one_or_none()
        if book is None:
            logger.debug(f"Book {book_id} not found")
            return ResponseModel[BookResponse].fail(messages.NOT_FOUND)

        return ResponseModel[BookResponse](
            data=BookResponse.model_validate(book),
            message=messages.BOOK_FOUND,
        )

    def get_books_by_author_id(self, author_id: int) -> ResponseModel[list[BookResponse]]:
        """
        List the books written by an author, in insertion (ID) order.

        An unknown author yields the not-found envelope; an existing
        author without books yields an empty list.
        """
        if self.db.get(Author, author_id) is None:
            logger.debug(f"Author {author_id} not found while listing books")
            return ResponseModel[list[BookResponse]].fail(messages.NOT_FOUND)

        stmt = self._select_books().where(Book.author_id == author_id)
        books = self.db.execute(stmt).scalars().all()

        return ResponseModel[list[BookResponse]](
            data=[BookResponse.model_validate(b) for b in books],
            message=messages.BOOKS_LISTED,
        )

    def list_books(self) -> ResponseModel[list[BookResponse]]:
        """List all books in insertion (ID) order."""
        return ResponseModel[list[BookResponse]](
            data=self._all_books(),
            message=messages.BOOKS_LISTED,
        )

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------
    def create_book(self, book_data: BookCreate) -> ResponseModel[list[BookResponse]]:
        """
        Create a new book for an existing author.

        Returns:
            Envelope with the full, updated list of books, or the
            AUTHOR_NOT_FOUND envelope when author_id doesn't exist
        """
        author = self.db.get(Author, book_data.author_id)
        if author is None:
            logger.debug(f"Cannot create book: author {book_data.author_id} not found")
            return ResponseModel[list[BookResponse]].fail(messages.AUTHOR_NOT_FOUND)

        book = Book(title=book_data.title, author=author)
        self.db.add(book)
        self.db.commit()

        logger.info(f"Created book {book.id}: '{book.title}' (author {author.id})")

        return ResponseModel[list[BookResponse]](
            data=self._all_books(),
            message=messages.BOOK_CREATED,
        )

    def edit_book(
        self,
        book_id: int,
        book_data: BookEdit,
    ) -> ResponseModel[list[BookResponse]]:
        """
        Replace the title and author of an existing book.

        Returns:
            Envelope with the updated list of books; the not-found envelope
            when the book doesn't exist; the AUTHOR_NOT_FOUND envelope when
            the new author_id doesn't exist
        """
        book = self.db.get(Book, book_id)
        if book is None:
            logger.debug(f"Book {book_id} not found for edit")
            return ResponseModel[list[BookResponse]].fail(messages.NOT_FOUND)

        author = self.db.get(Author, book_data.author_id)
        if author is None:
            logger.debug(f"Cannot edit book {book_id}: author {book_data.author_id} not found")
            return ResponseModel[list[BookResponse]].fail(messages.AUTHOR_NOT_FOUND)

        book.title = book_data.title
        book.author = author
        self.db.commit()

        logger.info(f"Edited book {book_id}")

        return ResponseModel[list[BookResponse]](
            data=self._all_books(),
            message=messages.BOOK_EDITED,
        )

    def delete_book(self, book_id: int) -> ResponseModel[list[BookResponse]]:
        """
        Delete a book.

        Returns:
            Envelope with the remaining books, or the not-found envelope
        """
        book = self.db.get(Book, book_id)
        if book is None:
            logger.debug(f"Book {book_id} not found for delete")
            return ResponseModel[list[BookResponse]].fail(messages.NOT_FOUND)

        self.db.delete(book)
        self.db.commit()

        logger.info(f"Deleted book {book_id}")

        return ResponseModel[list[BookResponse]](
            data=self._all_books(),
            message=messages.BOOK_DELETED,
        )

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------
    @staticmethod
    def _select_books():
        # Eager-load the author to avoid one extra query per book
        return select(Book).options(selectinload(Book.author)).order_by(Book.id)

    def _all_books(self) -> list[BookResponse]:
        books = self.db.execute(self._select_books()).scalars().all()
        return [BookResponse.model_validate(b) for b in books]
