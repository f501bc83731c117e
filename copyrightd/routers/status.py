"""Status router for copyrightd API.

Provides health check and status information.
"""

import logging
import time
from typing import Annotated

from fastapi import APIRouter
from fastapi import Depends

from copyright_library.services.project_service import CopyrightProject

from .. import __version__
from ..dependencies import get_copyright_project
from ..models import StatusResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["status"])

# Track daemon start time for uptime calculation
_start_time = time.time()


@router.get("/status", response_model=StatusResponse)
async def get_status(
    project: Annotated[CopyrightProject, Depends(get_copyright_project)],
) -> StatusResponse:
    """Get daemon status.

    Returns:
        Version, uptime, project root and profile counts
    """
    manager = project.manager
    return StatusResponse(
        status="running",
        version=__version__,
        uptime_seconds=time.time() - _start_time,
        project_path=str(project.project_root),
        profile_count=len(manager.scheme_manager.all_schemes),
        has_assignments=manager.has_any_copyrights(),
    )


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint.

    Returns:
        Simple health status
    """
    return {"status": "healthy"}
