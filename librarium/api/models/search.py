"""
Search session API models.
"""

from typing import Literal

from pydantic import BaseModel

from librarium.api.models.books import BookModel
from librarium.search import SearchState


class SearchInputRequest(BaseModel):
    """Raw text typed into the search box."""
    text: str = ""


class SearchStateResponse(BaseModel):
    """Current state of a search box."""
    status: Literal["idle", "searching", "completed"]
    query: str
    results: list[BookModel]
    count: int

    @classmethod
    def from_state(cls, state: SearchState) -> "SearchStateResponse":
        results = [BookModel.from_book(book) for book in state.results]
        return cls(
            status=state.status,
            query=state.query,
            results=results,
            count=len(results),
        )


class SearchSessionResponse(BaseModel):
    """A newly opened search session."""
    session_id: str
    state: SearchStateResponse
