"""
Search session service: one type-ahead orchestrator per open search box.
"""

import logging
import uuid
from collections import OrderedDict
from typing import Callable, Optional, Sequence

from librarium.catalogue import catalogue
from librarium.config import config
from librarium.models import Book
from librarium.remote import get_remote_source
from librarium.search import RemoteSearch, SearchOrchestrator, SearchState

logger = logging.getLogger(__name__)


class SessionNotFoundError(KeyError):
    """No open search session has the given id."""


class SearchSessionService:
    """Creates, drives and closes search sessions."""

    def __init__(
        self,
        remote_search: Optional[RemoteSearch] = None,
        snapshot: Optional[Callable[[], Sequence[Book]]] = None,
        max_sessions: Optional[int] = None,
    ):
        self._remote_search = remote_search
        self._snapshot = snapshot or catalogue.snapshot
        self.max_sessions = max_sessions or config.SEARCH_MAX_SESSIONS
        self._sessions: "OrderedDict[str, SearchOrchestrator]" = OrderedDict()

    @property
    def session_count(self) -> int:
        return len(self._sessions)

    def create_session(self) -> tuple[str, SearchOrchestrator]:
        """Open a new search box session, evicting the oldest one if full."""
        while len(self._sessions) >= self.max_sessions:
            old_id, old = self._sessions.popitem(last=False)
            old.close()
            logger.info(f"Evicted search session {old_id}")

        remote = self._remote_search or get_remote_source()
        orchestrator = SearchOrchestrator(remote_search=remote, snapshot=self._snapshot)
        session_id = uuid.uuid4().hex
        self._sessions[session_id] = orchestrator
        logger.debug(f"Opened search session {session_id}")
        return session_id, orchestrator

    def get(self, session_id: str) -> SearchOrchestrator:
        """
        Raises:
            SessionNotFoundError: If the session does not exist.
        """
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(session_id) from None

    def push_input(self, session_id: str, text: str) -> SearchState:
        return self.get(session_id).set_input(text)

    async def get_state(self, session_id: str, wait: bool = False) -> SearchState:
        orchestrator = self.get(session_id)
        if wait:
            return await orchestrator.settle()
        return orchestrator.state

    def reset(self, session_id: str) -> SearchState:
        orchestrator = self.get(session_id)
        orchestrator.reset()
        return orchestrator.state

    def close(self, session_id: str) -> None:
        orchestrator = self._sessions.pop(session_id, None)
        if orchestrator is None:
            raise SessionNotFoundError(session_id)
        orchestrator.close()
        logger.debug(f"Closed search session {session_id}")

    def close_all(self) -> None:
        for orchestrator in self._sessions.values():
            orchestrator.close()
        self._sessions.clear()


# Singleton
search_service = SearchSessionService()
