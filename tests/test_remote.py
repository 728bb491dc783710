"""
Tests for remote search sources.
"""

import httpx
import pytest

from librarium import remote
from librarium.config import Config
from librarium.remote import (
    GoogleBooksSource,
    OfflineSource,
    RemoteSearchError,
    get_remote_source,
    volume_to_book,
)

DUNE_VOLUME = {
    "kind": "books#volume",
    "id": "B1hSG45JCX4C",
    "volumeInfo": {
        "title": "Dune",
        "authors": ["Frank Herbert", "Brian Herbert"],
        "categories": ["Fiction"],
        "description": "Set on the desert planet Arrakis.",
        "publishedDate": "1965",
        "industryIdentifiers": [
            {"type": "ISBN_10", "identifier": "0441013597"},
            {"type": "ISBN_13", "identifier": "9780441013593"},
        ],
        "imageLinks": {
            "smallThumbnail": "http://books.example/small.jpg",
            "thumbnail": "http://books.example/thumb.jpg",
        },
    },
}


def make_source(handler, api_key=""):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return GoogleBooksSource(
        base_url="https://books.example/v1/",
        api_key=api_key,
        client=client,
    )


class TestVolumeMapping:
    """Tests for mapping Google Books volumes onto books."""

    def test_full_volume(self):
        book = volume_to_book(DUNE_VOLUME)

        assert book.id == "B1hSG45JCX4C"
        assert book.title == "Dune"
        assert book.author == "Frank Herbert"
        assert book.genre == "Fiction"
        assert book.description == "Set on the desert planet Arrakis."
        assert book.isbn == "9780441013593"
        assert book.cover_image == "http://books.example/thumb.jpg"
        assert book.published_date == "1965"

    def test_sparse_volume(self):
        book = volume_to_book({"id": "x", "volumeInfo": {"title": "Anonymous Pamphlet"}})

        assert book.author == "Unknown Author"
        assert book.genre is None
        assert book.isbn is None
        assert book.cover_image is None

    def test_isbn_10_when_no_isbn_13(self):
        volume = {
            "id": "y",
            "volumeInfo": {
                "title": "Old Book",
                "industryIdentifiers": [{"type": "ISBN_10", "identifier": "0123456789"}],
            },
        }

        assert volume_to_book(volume).isbn == "0123456789"


class TestGoogleBooksSource:
    """Tests for the Google Books HTTP client."""

    @pytest.mark.asyncio
    async def test_search_maps_items(self):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json={"totalItems": 1, "items": [DUNE_VOLUME]})

        source = make_source(handler)
        books = await source.search("dune", 8)
        await source.aclose()

        assert [b.title for b in books] == ["Dune"]
        assert requests[0].url.path == "/v1/volumes"
        assert requests[0].url.params["q"] == "dune"
        assert requests[0].url.params["maxResults"] == "8"
        assert "key" not in requests[0].url.params

    @pytest.mark.asyncio
    async def test_limit_is_clamped(self):
        seen = []

        def handler(request):
            seen.append(request.url.params["maxResults"])
            return httpx.Response(200, json={"totalItems": 0})

        source = make_source(handler)
        await source.search("a", 500)
        await source.search("a", 0)

        assert seen == ["40", "1"]

    @pytest.mark.asyncio
    async def test_api_key_is_sent(self):
        seen = []

        def handler(request):
            seen.append(request.url.params.get("key"))
            return httpx.Response(200, json={"totalItems": 0})

        source = make_source(handler, api_key="secret")
        await source.search("dune", 5)

        assert seen == ["secret"]

    @pytest.mark.asyncio
    async def test_no_items_is_empty(self):
        source = make_source(lambda request: httpx.Response(200, json={"totalItems": 0}))

        assert await source("nothing", 5) == []

    @pytest.mark.asyncio
    async def test_error_status_raises(self):
        source = make_source(lambda request: httpx.Response(429, json={"error": "quota"}))

        with pytest.raises(RemoteSearchError, match="429"):
            await source.search("dune", 5)

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        source = make_source(handler)

        with pytest.raises(RemoteSearchError, match="request failed"):
            await source.search("dune", 5)


class TestOfflineSource:
    """Tests for the always-unavailable source."""

    @pytest.mark.asyncio
    async def test_always_fails(self):
        with pytest.raises(RemoteSearchError):
            await OfflineSource()("dune", 5)


class TestGetRemoteSource:
    """Tests for provider selection."""

    @pytest.fixture(autouse=True)
    def reset_source_singleton(self):
        """Reset the source singleton around each test."""
        original = Config.SEARCH_REMOTE_PROVIDER
        remote._source_instance = None
        yield
        remote._source_instance = None
        Config.SEARCH_REMOTE_PROVIDER = original

    def test_offline_provider(self):
        Config.SEARCH_REMOTE_PROVIDER = "offline"

        assert isinstance(get_remote_source(), OfflineSource)

    def test_google_books_provider(self):
        Config.SEARCH_REMOTE_PROVIDER = "Google_Books"

        assert isinstance(get_remote_source(), GoogleBooksSource)

    def test_singleton(self):
        Config.SEARCH_REMOTE_PROVIDER = "offline"

        assert get_remote_source() is get_remote_source()

    def test_unknown_provider(self):
        Config.SEARCH_REMOTE_PROVIDER = "library_of_babel"

        with pytest.raises(ValueError, match="Unsupported remote search provider"):
            get_remote_source()
