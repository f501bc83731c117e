"""API routers for copyrightd.

This module contains FastAPI routers for all API endpoints.
"""

from .files import router as files_router
from .mappings import router as mappings_router
from .profiles import router as profiles_router
from .status import router as status_router

__all__ = [
    "files_router",
    "mappings_router",
    "profiles_router",
    "status_router",
]
