"""
Librarium Search - FastAPI Application
Serves type-ahead search sessions over the user's reading library.
"""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from librarium import __version__
from librarium.api.middleware import register_middleware
from librarium.api.models.system import ErrorResponse
from librarium.api.routes import all_routers
from librarium.catalogue import catalogue
from librarium.config import config
from librarium.remote import close_remote_source, get_remote_source
from librarium.services.search_service import search_service

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    logger.info("Starting Librarium search...")

    config.validate()

    if config.LIBRARY_PATH:
        catalogue.load_file(config.LIBRARY_PATH)

    source = get_remote_source()
    logger.info(f"Remote search provider: {source.name}")
    logger.info(f"Debounce: {config.SEARCH_DEBOUNCE_SECONDS}s, result limit: {config.SEARCH_RESULT_LIMIT}")

    yield

    logger.info("Shutting down Librarium search...")
    search_service.close_all()
    await close_remote_source()
    logger.info("Shutdown complete")


app = FastAPI(
    title="Librarium Search API",
    description="Type-ahead search over a personal reading library",
    version=__version__,
    lifespan=lifespan
)

register_middleware(app)

for router in all_routers:
    app.include_router(router)


# Exception handlers
@app.exception_handler(ValueError)
async def value_error_handler(request, exc):
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(
            error="Invalid request", detail=str(exc), code="invalid_request"
        ).model_dump()
    )


@app.exception_handler(Exception)
async def general_exception_handler(request, exc):
    logger.error(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal server error", detail=str(exc), code="internal_error"
        ).model_dump()
    )


# Entry point for running with uvicorn directly
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "librarium.main:app",
        host=config.API_HOST,
        port=config.API_PORT,
        reload=False,
        log_level=config.LOG_LEVEL.lower()
    )
