"""Copyright profile registry."""

from .manager import CopyrightManager
from .manager import create_scheme_manager
from .manager import write_profile

__all__ = [
    "CopyrightManager",
    "create_scheme_manager",
    "write_profile",
]
