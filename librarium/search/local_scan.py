"""
Local fallback search over the in-memory catalogue snapshot.
"""

from typing import Callable, Optional, Sequence

from librarium.models import Book


def _matches(book: Book, term: str) -> bool:
    for value in (book.title, book.author, book.genre, book.description):
        if value and term in value.lower():
            return True
    return False


def scan_books(query: str, books: Sequence[Book]) -> list[Book]:
    """
    Case-insensitive substring match against title, author, genre and description.

    A book matches when any of those fields contains the query. Matches are
    returned in collection order; nothing is ranked or re-sorted.
    """
    if not query:
        return []
    term = query.lower()
    return [book for book in books if _matches(book, term)]


class LocalIndexScanner:
    """Scans whatever the catalogue provider currently holds."""

    def __init__(self, snapshot: Callable[[], Sequence[Book]]):
        self._snapshot = snapshot

    def scan(self, query: str, books: Optional[Sequence[Book]] = None) -> list[Book]:
        return scan_books(query, self._snapshot() if books is None else books)
