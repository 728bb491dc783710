"""
In-memory book catalogue.

Holds the already-loaded snapshot of the user's books that the search box
scans when the remote source is unavailable.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, Optional

import yaml

from librarium.models import Book

logger = logging.getLogger(__name__)


class BookCatalogue:
    """Owns the user's book list; readers only ever see immutable snapshots."""

    def __init__(self, books: Optional[Iterable[Book]] = None):
        self._books: tuple[Book, ...] = tuple(books or ())

    def snapshot(self) -> tuple[Book, ...]:
        return self._books

    def replace(self, books: Iterable[Book]) -> None:
        """Swap the whole collection for a new one."""
        self._books = tuple(books)
        logger.info(f"Catalogue replaced: {len(self._books)} books")

    def add(self, book: Book) -> None:
        """
        Append a book, or replace the existing record with the same id in place.
        """
        books = list(self._books)
        for i, existing in enumerate(books):
            if existing.id == book.id:
                books[i] = book
                break
        else:
            books.append(book)
        self._books = tuple(books)

    def get(self, book_id: str) -> Optional[Book]:
        for book in self._books:
            if book.id == book_id:
                return book
        return None

    def load_file(self, path: Path) -> int:
        """
        Load books from a YAML or JSON file.

        The file holds either a list of book mappings or a mapping with a
        ``books`` list.

        Returns:
            Number of books loaded.

        Raises:
            ValueError: If the file type is unsupported or a record is invalid.
        """
        path = Path(path)
        if not path.exists():
            logger.warning(f"Library file not found: {path}, catalogue left empty")
            return 0

        content = path.read_text(encoding="utf-8")

        if path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(content)
        elif path.suffix == ".json":
            data = json.loads(content)
        else:
            raise ValueError(f"Unsupported library file format: {path.suffix}")

        if isinstance(data, dict):
            data = data.get("books", [])

        self.replace(Book.from_dict(item) for item in (data or []))
        logger.info(f"Loaded {len(self._books)} books from {path}")
        return len(self._books)

    def __len__(self) -> int:
        return len(self._books)


# Singleton catalogue instance
catalogue = BookCatalogue()
