"""
Catalogue routes: GET/PUT/POST /books
"""

from fastapi import APIRouter

from librarium.api.models.books import BookListResponse, BookModel, ReplaceBooksRequest
from librarium.api.models.system import ErrorResponse
from librarium.catalogue import catalogue

router = APIRouter(prefix="/books", tags=["Books"])


def _listing() -> BookListResponse:
    books = [BookModel.from_book(book) for book in catalogue.snapshot()]
    return BookListResponse(books=books, count=len(books))


@router.get("", response_model=BookListResponse)
async def list_books():
    """List the books the local search fallback scans."""
    return _listing()


@router.put("", response_model=BookListResponse, responses={400: {"model": ErrorResponse}})
async def replace_books(request: ReplaceBooksRequest):
    """Replace the catalogue snapshot wholesale."""
    catalogue.replace(model.to_book() for model in request.books)
    return _listing()


@router.post(
    "", response_model=BookModel, status_code=201, responses={400: {"model": ErrorResponse}}
)
async def add_book(book: BookModel):
    """Add a book, or update the one with the same id."""
    catalogue.add(book.to_book())
    return book
