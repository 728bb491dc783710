"""
Type-ahead search orchestrator.

Ties normalization, the result cache, debouncing and cancellable dispatch
together into the state machine behind one search box:

    keystroke -> normalize -> (empty: Idle | cached: Completed | else debounce)
              -> dispatch (remote, local fallback on failure) -> cache -> Completed

Only the latest input ever reaches the screen. Debounce timers check that
their query still matches the input when they fire, and dispatch results
are accepted only while their generation token is current and their query
still matches the input.
"""

import logging
from typing import Callable, Optional, Sequence

from librarium.config import config
from librarium.models import Book
from librarium.search.cache import ResultCache
from librarium.search.debounce import DebounceScheduler
from librarium.search.dispatcher import (
    CancellableQueryDispatcher,
    GenerationToken,
    RemoteSearch,
)
from librarium.search.local_scan import LocalIndexScanner
from librarium.search.normalizer import normalize_query
from librarium.search.state import IDLE, Completed, Searching, SearchState

logger = logging.getLogger(__name__)

StateListener = Callable[[SearchState], None]


class SearchOrchestrator:
    """
    State machine for a single search box.

    Must be driven from within a running asyncio event loop; all state
    lives on this instance and is only touched from that loop.
    """

    def __init__(
        self,
        remote_search: RemoteSearch,
        snapshot: Callable[[], Sequence[Book]],
        debounce_seconds: Optional[float] = None,
        result_limit: Optional[int] = None,
        cache: Optional[ResultCache] = None,
    ):
        self.debounce_seconds = (
            config.SEARCH_DEBOUNCE_SECONDS if debounce_seconds is None else debounce_seconds
        )
        self.cache = cache if cache is not None else ResultCache()
        self.scanner = LocalIndexScanner(snapshot)

        self._debounce = DebounceScheduler()
        self._dispatcher = CancellableQueryDispatcher(
            remote_search=remote_search,
            scanner=self.scanner,
            cache=self.cache,
            on_complete=self._on_dispatch_complete,
            limit=result_limit or config.SEARCH_RESULT_LIMIT,
        )

        self._input_text = ""
        self._query = ""
        self._state: SearchState = IDLE
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def input_text(self) -> str:
        """Raw text as last pushed by the presentation layer."""
        return self._input_text

    @property
    def query(self) -> str:
        """Canonical form of the current input."""
        return self._query

    @property
    def dispatcher(self) -> CancellableQueryDispatcher:
        return self._dispatcher

    @property
    def busy(self) -> bool:
        """True while a debounce timer is armed or a dispatch is in flight."""
        return self._debounce.pending or self._dispatcher.in_flight

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a callback invoked with every new state.

        Returns:
            A function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_input(self, raw: Optional[str]) -> SearchState:
        """
        Push new raw input from the search box.

        Returns:
            The state right after handling the input. Cache hits are
            already ``Completed``; misses keep the previous state until the
            debounce timer fires.
        """
        self._input_text = raw or ""
        query = normalize_query(raw)
        self._query = query

        if not query:
            self._cancel_pending()
            self._set_state(IDLE)
            return self._state

        cached = self.cache.get(query)
        if cached is not None:
            logger.debug(f"Cache hit for {query!r}")
            self._cancel_pending()
            self._set_state(Completed(query, cached))
            return self._state

        in_flight = self._dispatcher.current
        if in_flight is not None and in_flight.query == query:
            # Already being fetched; let that dispatch finish
            self._debounce.cancel()
            return self._state

        self._debounce.schedule(lambda: self._on_debounce_fired(query), self.debounce_seconds)
        return self._state

    def reset(self) -> None:
        """Return to Idle and drop in-flight work, keeping cached results."""
        self._cancel_pending()
        self._input_text = ""
        self._query = ""
        self._set_state(IDLE)

    def close(self) -> None:
        """Reset, clear the cache and detach all listeners."""
        self.reset()
        self.cache.clear()
        self._listeners.clear()

    async def settle(self) -> SearchState:
        """Wait until no timer is armed and no dispatch is in flight."""
        while self.busy:
            if self._debounce.pending:
                await self._debounce.wait()
            else:
                await self._dispatcher.wait()
        return self._state

    def _cancel_pending(self) -> None:
        self._debounce.cancel()
        self._dispatcher.cancel()

    def _on_debounce_fired(self, query: str) -> None:
        if query != self._query:
            logger.debug(f"Debounce for {query!r} superseded by {self._query!r}")
            return

        # An earlier dispatch may have filled the cache while we waited
        cached = self.cache.get(query)
        if cached is not None:
            self._dispatcher.cancel()
            self._set_state(Completed(query, cached))
            return

        self._set_state(Searching(query))
        if query != self._query or self._debounce.pending:
            # A listener pushed new input while being notified
            return
        self._dispatcher.dispatch(query)

    def _on_dispatch_complete(self, token: GenerationToken, results: tuple[Book, ...]) -> None:
        if token.query != self._query:
            logger.debug(f"Results for {token.query!r} arrived after input moved on")
            return
        self._set_state(Completed(token.query, results))

    def _set_state(self, state: SearchState) -> None:
        if state == self._state:
            return
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception as e:
                logger.error(f"Search state listener failed: {e}")
