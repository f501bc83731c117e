"""Copyright library layer.

Business logic for per-project copyright profiles; copyrightd is a thin
transport on top of it.

Public Interface:
    Modules:
    - registry: Profile registry and scope resolution
    - schemes: Lazy profile records and their persistence
    - models: Profiles and per-file-type options
    - services: Scopes and project wiring
    - notices: Notice rendering and insertion
    - tracking: New-file notice trigger
    - storage: XML persistence and paths
    - config: Configuration loading
"""

# Re-export key types for convenience
from .models import CopyrightProfile
from .registry import CopyrightManager

__all__ = [
    "CopyrightManager",
    "CopyrightProfile",
]
