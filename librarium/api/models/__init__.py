"""
Pydantic models (schemas) for API request/response types.

All models are re-exported here for convenience:
    from librarium.api.models import SearchStateResponse, BookModel, ...
"""

from librarium.api.models.system import (
    HealthResponse,
    ErrorResponse,
)
from librarium.api.models.books import (
    BookModel,
    BookListResponse,
    ReplaceBooksRequest,
)
from librarium.api.models.search import (
    SearchInputRequest,
    SearchStateResponse,
    SearchSessionResponse,
)

__all__ = [
    "HealthResponse",
    "ErrorResponse",
    "BookModel",
    "BookListResponse",
    "ReplaceBooksRequest",
    "SearchInputRequest",
    "SearchStateResponse",
    "SearchSessionResponse",
]
