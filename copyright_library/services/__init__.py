"""Services for copyright_library."""

from .project_service import CopyrightProject
from .scope_service import ScopeService

__all__ = [
    "CopyrightProject",
    "ScopeService",
]
