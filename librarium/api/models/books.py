"""
Book catalogue API models.
"""

from typing import Optional

from pydantic import BaseModel

from librarium.models import Book


class BookModel(BaseModel):
    """A book as exchanged over the API."""
    id: str
    title: str
    author: str = ""
    genre: Optional[str] = None
    description: Optional[str] = None
    isbn: Optional[str] = None
    cover_image: Optional[str] = None
    published_date: Optional[str] = None

    @classmethod
    def from_book(cls, book: Book) -> "BookModel":
        return cls(**book.to_dict())

    def to_book(self) -> Book:
        return Book(**self.model_dump())


class BookListResponse(BaseModel):
    """All books in the catalogue."""
    books: list[BookModel]
    count: int


class ReplaceBooksRequest(BaseModel):
    """Replacement catalogue snapshot."""
    books: list[BookModel]
