"""Scheme management for copyright_library.

Public Interface:
    - SchemeManager: Named schemes backed by a record store
    - SchemeWrapper: Named handle on a scheme
    - InitializedSchemeWrapper: Wrapper around an in-memory scheme
    - LazySchemeWrapper: Wrapper that deserializes on first access
    - SchemeDataHolder: Raw scheme record
"""

from .manager import SchemeManager
from .wrappers import InitializedSchemeWrapper
from .wrappers import LazySchemeWrapper
from .wrappers import SchemeDataHolder
from .wrappers import SchemeWrapper
from .wrappers import element_digest

__all__ = [
    "SchemeManager",
    "SchemeWrapper",
    "InitializedSchemeWrapper",
    "LazySchemeWrapper",
    "SchemeDataHolder",
    "element_digest",
]
