"""
Incremental (type-ahead) search over the reading library.
"""

from librarium.search.cache import ResultCache
from librarium.search.debounce import DebounceScheduler
from librarium.search.dispatcher import (
    CancellableQueryDispatcher,
    GenerationToken,
    RemoteSearch,
)
from librarium.search.local_scan import LocalIndexScanner, scan_books
from librarium.search.normalizer import normalize_query
from librarium.search.orchestrator import SearchOrchestrator
from librarium.search.state import IDLE, Completed, Idle, Searching, SearchState

__all__ = [
    "CancellableQueryDispatcher",
    "Completed",
    "DebounceScheduler",
    "GenerationToken",
    "IDLE",
    "Idle",
    "LocalIndexScanner",
    "RemoteSearch",
    "ResultCache",
    "SearchOrchestrator",
    "SearchState",
    "Searching",
    "normalize_query",
    "scan_books",
]
