"""Shared dependency factories for FastAPI endpoints.

The project services are built once per process from the loaded
configuration; tests override `get_copyright_project` on the app.
"""

from copyright_library.config.loader import load_config
from copyright_library.services.project_service import CopyrightProject

_project: CopyrightProject | None = None


def get_copyright_project() -> CopyrightProject:
    """Get the copyright project services.

    Returns:
        CopyrightProject built from the current configuration
    """
    global _project
    if _project is None:
        _project = CopyrightProject(load_config())
    return _project


def reset_copyright_project() -> None:
    """Drop the cached project so the next request rebuilds it."""
    global _project
    if _project is not None:
        _project.close()
    _project = None
