"""
System routes: /health
"""

from fastapi import APIRouter

from librarium import __version__
from librarium.api.models.system import HealthResponse
from librarium.catalogue import catalogue
from librarium.config import config
from librarium.services.search_service import search_service

router = APIRouter(tags=["System"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Report the remote provider, catalogue size and open search sessions."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        remote_provider=config.SEARCH_REMOTE_PROVIDER.lower(),
        catalogue_size=len(catalogue),
        open_sessions=search_service.session_count,
    )
