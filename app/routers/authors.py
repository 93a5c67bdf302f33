"""
Authors Router

CRUD endpoints for authors.

Handlers stay thin: they call AuthorService and return its envelope.
A failed envelope (record not found) is sent with HTTP 404.
"""

from fastapi import APIRouter, Response, status

from app.dependencies import AuthorServiceDep
from app.schemas import AuthorCreate, AuthorEdit, AuthorResponse, ResponseModel
from app.utils.responses import apply_envelope_status

router = APIRouter(
    prefix="/authors",
    tags=["Authors"],
    responses={
        404: {"description": "Author not found"},
    },
)


@router.get(
    "/",
    response_model=ResponseModel[list[AuthorResponse]],
    summary="List all authors",
    description="Get a list of all authors in the system.",
)
def list_authors(service: AuthorServiceDep) -> ResponseModel[list[AuthorResponse]]:
    """List all authors."""
    return service.list_authors()


@router.get(
    "/by-book/{book_id}",
    response_model=ResponseModel[AuthorResponse],
    summary="Get the author of a book",
    description="Retrieve the author who wrote a specific book.",
)
def get_author_by_book(
    book_id: int,
    service: AuthorServiceDep,
    response: Response,
) -> ResponseModel[AuthorResponse]:
    """Get the author of a book."""
    return apply_envelope_status(response, service.get_author_by_book_id(book_id))


@router.get(
    "/{author_id}",
    response_model=ResponseModel[AuthorResponse],
    summary="Get an author by ID",
    description="Retrieve detailed information about a specific author.",
)
def get_author(
    author_id: int,
    service: AuthorServiceDep,
    response: Response,
) -> ResponseModel[AuthorResponse]:
    """Get a single author by ID."""
    return apply_envelope_status(response, service.get_author_by_id(author_id))


@router.post(
    "/",
    response_model=ResponseModel[list[AuthorResponse]],
    status_code=status.HTTP_201_CREATED,
    summary="Create a new author",
    description="Create a new author and return the updated list of authors.",
)
def create_author(
    author_data: AuthorCreate,
    service: AuthorServiceDep,
) -> ResponseModel[list[AuthorResponse]]:
    """Create a new author."""
    return service.create_author(author_data)


@router.put(
    "/{author_id}",
    response_model=ResponseModel[list[AuthorResponse]],
    summary="Edit an author",
    description="Replace an existing author's name.",
)
def edit_author(
    author_id: int,
    author_data: AuthorEdit,
    service: AuthorServiceDep,
    response: Response,
) -> ResponseModel[list[AuthorResponse]]:
    """Edit an existing author."""
    return apply_envelope_status(response, service.edit_author(author_id, author_data))


@router.delete(
    "/{author_id}",
    response_model=ResponseModel[list[AuthorResponse]],
    summary="Delete an author",
    description="Permanently delete an author together with their books.",
)
def delete_author(
    author_id: int,
    service: AuthorServiceDep,
    response: Response,
) -> ResponseModel[list[AuthorResponse]]:
    """Delete an author."""
    return apply_envelope_status(response, service.delete_author(author_id))
