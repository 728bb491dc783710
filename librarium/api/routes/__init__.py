"""
Route modules for the Librarium API.

Each module defines a FastAPI APIRouter for a specific domain.
All routers are collected in ``all_routers`` for easy inclusion.
"""

from librarium.api.routes.system import router as system_router
from librarium.api.routes.search import router as search_router
from librarium.api.routes.books import router as books_router

all_routers = [
    system_router,
    search_router,
    books_router,
]

__all__ = ["all_routers"]
