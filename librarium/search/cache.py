"""
Session-scoped result cache for type-ahead search.
"""

import logging
from typing import Iterable, Optional

from librarium.models import Book

logger = logging.getLogger(__name__)


class ResultCache:
    """
    Maps a canonical query to the ordered results it produced.

    Entries are never evicted individually; the whole cache lives as long as
    the search box that owns it and is dropped with ``clear()``.
    """

    def __init__(self):
        self._entries: dict[str, tuple[Book, ...]] = {}

    def get(self, query: str) -> Optional[tuple[Book, ...]]:
        """Return cached results for ``query``, or None on a miss."""
        return self._entries.get(query)

    def put(self, query: str, results: Iterable[Book]) -> None:
        """Store results for ``query``, replacing any previous entry."""
        self._entries[query] = tuple(results)
        logger.debug(f"Cached {len(self._entries[query])} results for {query!r}")

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, query: object) -> bool:
        return query in self._entries

    def __len__(self) -> int:
        return len(self._entries)
