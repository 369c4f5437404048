"""API routers."""

from .health import router as health_router
from .ideas import router as ideas_router

__all__ = [
    "health_router",
    "ideas_router",
]
