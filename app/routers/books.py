"""
Books Router

CRUD endpoints for books.

Follows the same patterns as the authors router. Creating or editing a
book with an unknown author_id returns the failed envelope with HTTP 404.
"""

from fastapi import APIRouter, Response, status

from app.dependencies import BookServiceDep
from app.schemas import BookCreate, BookEdit, BookResponse, ResponseModel
from app.utils.responses import apply_envelope_status

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        404: {"description": "Book or author not found"},
    },
)


@router.get(
    "/",
    response_model=ResponseModel[list[BookResponse]],
    summary="List all books",
)
def list_books(service: BookServiceDep) -> ResponseModel[list[BookResponse]]:
    """List all books with their authors."""
    return service.list_books()


@router.get(
    "/by-author/{author_id}",
    response_model=ResponseModel[list[BookResponse]],
    summary="Get books by author",
    description="Get all books written by a specific author.",
)
def get_books_by_author(
    author_id: int,
    service: BookServiceDep,
    response: Response,
) -> ResponseModel[list[BookResponse]]:
    return apply_envelope_status(response, service.get_books_by_author_id(author_id))


@router.get(
    "/{book_id}",
    response_model=ResponseModel[BookResponse],
    summary="Get a book by ID",
)
def get_book(
    book_id: int,
    service: BookServiceDep,
    response: Response,
) -> ResponseModel[BookResponse]:
    return apply_envelope_status(response, service.get_book_by_id(book_id))


@router.post(
    "/",
    response_model=ResponseModel[list[BookResponse]],
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    description="Create a book for an existing author and return the updated list of books.",
)
def create_book(
    book_data: BookCreate,
    service: BookServiceDep,
    response: Response,
) -> ResponseModel[list[BookResponse]]:
    """
    Create a new book.

    The author referenced by author_id must exist, otherwise nothing is
    stored and the response is a 404 envelope.
    """
    return apply_envelope_status(
        response,
        service.create_book(book_data),
        success_code=status.HTTP_201_CREATED,
    )


@router.put(
    "/{book_id}",
    response_model=ResponseModel[list[BookResponse]],
    summary="Edit a book",
)
def edit_book(
    book_id: int,
    book_data: BookEdit,
    service: BookServiceDep,
    response: Response,
) -> ResponseModel[list[BookResponse]]:
    return apply_envelope_status(response, service.edit_book(book_id, book_data))


@router.delete(
    "/{book_id}",
    response_model=ResponseModel[list[BookResponse]],
    summary="Delete a book",
)
def delete_book(
    book_id: int,
    service: BookServiceDep,
    response: Response,
) -> ResponseModel[list[BookResponse]]:
    return apply_envelope_status(response, service.delete_book(book_id))
