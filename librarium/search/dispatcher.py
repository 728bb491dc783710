"""
Cancellable dispatch of remote search queries.

The dispatcher owns at most one live query. Every dispatch is stamped with a
generation token; when a query resolves, its token is compared with the
current one and anything stale is dropped without touching shared state.
Superseded tasks are also cancelled, but only as an optimization: a remote
call that ignores cancellation and completes anyway is still discarded.
"""

import asyncio
import itertools
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Optional, Sequence

from librarium.models import Book
from librarium.search.cache import ResultCache
from librarium.search.local_scan import LocalIndexScanner

logger = logging.getLogger(__name__)

# (query, limit) -> books; raising means failure
RemoteSearch = Callable[[str, int], Awaitable[Sequence[Book]]]


@dataclass(eq=False)
class GenerationToken:
    """Identifies one dispatch; compared by identity at resolution time."""
    generation: int
    query: str
    cancelled: bool = field(default=False)

    def cancel(self) -> None:
        self.cancelled = True


class CancellableQueryDispatcher:
    """
    Runs one remote query at a time and reconciles its outcome.

    On success the results are written to the cache and handed to
    ``on_complete``. On failure the local catalogue is scanned instead and
    the scan output is cached and handed over the same way, so callers never
    see an error. Results of superseded or cancelled dispatches are ignored.
    """

    def __init__(
        self,
        remote_search: RemoteSearch,
        scanner: LocalIndexScanner,
        cache: ResultCache,
        on_complete: Callable[[GenerationToken, tuple[Book, ...]], None],
        limit: int = 8,
    ):
        self.remote_search = remote_search
        self.scanner = scanner
        self.cache = cache
        self.on_complete = on_complete
        self.limit = limit

        self._generations = itertools.count(1)
        self._current: Optional[GenerationToken] = None
        self._task: Optional[asyncio.Task] = None

        self.remote_calls = 0
        self.fallback_scans = 0

    @property
    def current(self) -> Optional[GenerationToken]:
        return self._current

    @property
    def in_flight(self) -> bool:
        """True while the current dispatch has not resolved."""
        return self._task is not None

    def is_current(self, token: GenerationToken) -> bool:
        return token is self._current and not token.cancelled

    def dispatch(self, query: str) -> GenerationToken:
        """Abandon any prior query and start a new one for ``query``."""
        self.cancel()

        token = GenerationToken(generation=next(self._generations), query=query)
        self._current = token

        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self._run(token))
        logger.debug(f"Dispatched #{token.generation} for {query!r}")
        return token

    def cancel(self) -> None:
        """Invalidate the current token and abort its task if still running."""
        if self._current is not None:
            self._current.cancel()
            logger.debug(f"Cancelled #{self._current.generation} ({self._current.query!r})")
            self._current = None
        if self._task is not None:
            self._task.cancel()
            self._task = None

    async def wait(self) -> None:
        """Wait for the in-flight dispatch, if any, to finish."""
        task = self._task
        if task is not None:
            await asyncio.wait({task})

    async def _run(self, token: GenerationToken) -> None:
        self.remote_calls += 1
        try:
            remote_results = await self.remote_search(token.query, self.limit)
            results = tuple(remote_results or ())
        except asyncio.CancelledError:
            if token.cancelled:
                logger.debug(f"Dispatch #{token.generation} aborted")
                raise
            # Cancelled inside the remote call, not by us
            results = self._fallback(token, "remote call was cancelled")
        except Exception as e:
            if not self.is_current(token):
                logger.debug(f"Dropping failure of stale dispatch #{token.generation}: {e}")
                return
            results = self._fallback(token, e)

        if not self.is_current(token):
            logger.debug(f"Dropping stale results of dispatch #{token.generation}")
            return

        self.cache.put(token.query, results)
        self._current = None
        self._task = None
        self.on_complete(token, results)

    def _fallback(self, token: GenerationToken, reason) -> tuple[Book, ...]:
        logger.warning(
            f"Remote search failed for {token.query!r}, falling back to local scan: {reason}"
        )
        self.fallback_scans += 1
        return tuple(self.scanner.scan(token.query))
