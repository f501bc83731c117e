"""Models for copyright library."""

from .options import FileTypeOverride
from .options import LanguageOptions
from .options import Options
from .profiles import CopyrightProfile
from .scopes import ScopeDefinition
from .scopes import ScopesConfig

__all__ = [
    "CopyrightProfile",
    "FileTypeOverride",
    "LanguageOptions",
    "Options",
    "ScopeDefinition",
    "ScopesConfig",
]
