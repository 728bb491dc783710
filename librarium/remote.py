"""
Remote search sources for the type-ahead search box.

A source is any async callable ``(query, limit) -> Sequence[Book]``. Raising
signals failure; the search core then falls back to scanning the local
catalogue, so sources never need to handle degradation themselves.
"""

import logging
from typing import Any, Optional

import httpx

from librarium.config import Config
from librarium.models import Book

logger = logging.getLogger(__name__)

# Google Books rejects maxResults above this
GOOGLE_BOOKS_MAX_RESULTS = 40


class RemoteSearchError(Exception):
    """The remote source could not answer a query."""


class OfflineSource:
    """Source that is never available; every query is served locally."""

    name = "offline"

    async def search(self, query: str, limit: int) -> list[Book]:
        raise RemoteSearchError("Remote search is disabled")

    async def __call__(self, query: str, limit: int) -> list[Book]:
        return await self.search(query, limit)

    async def aclose(self) -> None:
        pass


class GoogleBooksSource:
    """Searches the Google Books volumes API."""

    name = "google_books"

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = (base_url or Config.GOOGLE_BOOKS_BASE_URL).rstrip("/")
        self.api_key = Config.GOOGLE_BOOKS_API_KEY if api_key is None else api_key
        self.client = client or httpx.AsyncClient(
            timeout=timeout or Config.REMOTE_TIMEOUT_SECONDS
        )

    async def search(self, query: str, limit: int) -> list[Book]:
        """
        Run a volumes query.

        Args:
            query: Free-text query (title, author, ISBN, ...).
            limit: Maximum number of volumes, clamped to what the API accepts.

        Returns:
            Books in API relevance order.

        Raises:
            RemoteSearchError: On transport errors or non-2xx responses.
        """
        params: dict[str, Any] = {
            "q": query,
            "maxResults": max(1, min(limit, GOOGLE_BOOKS_MAX_RESULTS)),
        }
        if self.api_key:
            params["key"] = self.api_key

        try:
            response = await self.client.get(f"{self.base_url}/volumes", params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise RemoteSearchError(
                f"Google Books returned {e.response.status_code} for {query!r}"
            ) from e
        except httpx.HTTPError as e:
            raise RemoteSearchError(f"Google Books request failed: {e}") from e

        data = response.json()
        return [volume_to_book(item) for item in data.get("items") or []]

    async def __call__(self, query: str, limit: int) -> list[Book]:
        return await self.search(query, limit)

    async def aclose(self) -> None:
        await self.client.aclose()


def _pick_isbn(identifiers: list[dict]) -> Optional[str]:
    by_type = {i.get("type"): i.get("identifier") for i in identifiers}
    return by_type.get("ISBN_13") or by_type.get("ISBN_10")


def volume_to_book(volume: dict) -> Book:
    """Map a Google Books volume resource onto a Book."""
    info = volume.get("volumeInfo", {})
    authors = info.get("authors") or []
    categories = info.get("categories") or []
    images = info.get("imageLinks") or {}

    return Book(
        id=volume["id"],
        title=info.get("title", ""),
        author=authors[0] if authors else "Unknown Author",
        genre=categories[0] if categories else None,
        description=info.get("description"),
        isbn=_pick_isbn(info.get("industryIdentifiers") or []),
        cover_image=images.get("thumbnail") or images.get("smallThumbnail"),
        published_date=info.get("publishedDate"),
    )


# Provider registry
_sources = {
    "google_books": GoogleBooksSource,
    "offline": OfflineSource,
}

_source_instance = None


def get_remote_source():
    """
    Get or create the remote search source for the configured provider.

    Raises:
        ValueError: If the provider is not supported.
    """
    global _source_instance

    if _source_instance is None:
        provider_name = Config.SEARCH_REMOTE_PROVIDER.lower()

        if provider_name not in _sources:
            raise ValueError(
                f"Unsupported remote search provider: {provider_name}. "
                f"Supported: {', '.join(_sources.keys())}"
            )

        settings = Config.get_remote_config()
        settings.pop("provider")
        settings.pop("limit")

        _source_instance = _sources[provider_name](**settings)
        logger.info(f"Initialized remote search provider: {provider_name}")

    return _source_instance


async def close_remote_source() -> None:
    """Close the active source's connections and forget it."""
    global _source_instance

    if _source_instance is not None:
        await _source_instance.aclose()
        _source_instance = None
