"""
Pytest configuration and shared fixtures for Librarium tests.
"""

import asyncio
import shutil
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from librarium.models import Book


class GatedRemote:
    """
    Remote search double whose calls only resolve once released.

    With ``ignore_cancel`` the call swallows task cancellation and still
    returns its results, like a transport that cannot abort requests.
    """

    def __init__(self, results=None, failures=(), ignore_cancel=False):
        self.results = results or {}
        self.failures = set(failures)
        self.ignore_cancel = ignore_cancel
        self.calls: list[tuple[str, int]] = []
        self._gates: dict[str, asyncio.Event] = {}

    def _gate(self, query: str) -> asyncio.Event:
        return self._gates.setdefault(query, asyncio.Event())

    def release(self, query: str) -> None:
        self._gate(query).set()

    @property
    def queries(self) -> list[str]:
        return [query for query, _ in self.calls]

    async def __call__(self, query: str, limit: int):
        self.calls.append((query, limit))
        try:
            await self._gate(query).wait()
        except asyncio.CancelledError:
            if not self.ignore_cancel:
                raise
        if query in self.failures:
            raise RuntimeError(f"remote unavailable for {query}")
        return list(self.results.get(query, []))


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def dune() -> Book:
    return Book(
        id="b1",
        title="Dune",
        author="Frank Herbert",
        genre="Science Fiction",
        description="A desert planet and the spice melange.",
    )


@pytest.fixture
def nineteen_eighty_four() -> Book:
    return Book(
        id="b2",
        title="1984",
        author="George Orwell",
        genre="Dystopian",
        description="Big Brother is watching you.",
    )


@pytest.fixture
def hobbit() -> Book:
    return Book(id="b3", title="The Hobbit", author="J. R. R. Tolkien", genre="Fantasy")


@pytest.fixture
def books(dune, nineteen_eighty_four, hobbit) -> list[Book]:
    """A small catalogue snapshot."""
    return [dune, nineteen_eighty_four, hobbit]


@pytest.fixture
def gated_remote() -> GatedRemote:
    return GatedRemote()


@pytest.fixture
def remote_factory():
    """Build GatedRemote instances with custom results and behaviour."""
    return GatedRemote
