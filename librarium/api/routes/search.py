"""
Search session routes: open a search box, push keystrokes, read its state.
"""

import logging

from fastapi import APIRouter, HTTPException, Query

from librarium.api.models.search import (
    SearchInputRequest,
    SearchSessionResponse,
    SearchStateResponse,
)
from librarium.services.search_service import SessionNotFoundError, search_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search/sessions", tags=["Search"])


def _not_found(session_id: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Search session not found: {session_id}")


@router.post("", response_model=SearchSessionResponse, status_code=201)
async def open_session():
    """Open a search box session with its own state and result cache."""
    session_id, orchestrator = search_service.create_session()
    return SearchSessionResponse(
        session_id=session_id,
        state=SearchStateResponse.from_state(orchestrator.state),
    )


@router.post("/{session_id}/input", response_model=SearchStateResponse)
async def push_input(session_id: str, request: SearchInputRequest):
    """
    Push the search box's current text.
    Cached queries complete immediately; others are debounced and dispatched.
    """
    try:
        state = search_service.push_input(session_id, request.text)
    except SessionNotFoundError:
        raise _not_found(session_id)
    return SearchStateResponse.from_state(state)


@router.get("/{session_id}/state", response_model=SearchStateResponse)
async def get_state(
    session_id: str,
    wait: bool = Query(False, description="Wait for pending debounce and dispatch first"),
):
    """Current state of the search box."""
    try:
        state = await search_service.get_state(session_id, wait=wait)
    except SessionNotFoundError:
        raise _not_found(session_id)
    return SearchStateResponse.from_state(state)


@router.post("/{session_id}/reset", response_model=SearchStateResponse)
async def reset_session(session_id: str):
    """Clear the search box (escape key or outside click). Cached results are kept."""
    try:
        state = search_service.reset(session_id)
    except SessionNotFoundError:
        raise _not_found(session_id)
    return SearchStateResponse.from_state(state)


@router.delete("/{session_id}", status_code=204)
async def close_session(session_id: str):
    """Close the search box and discard its cache."""
    try:
        search_service.close(session_id)
    except SessionNotFoundError:
        raise _not_found(session_id)
