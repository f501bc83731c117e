"""File event API endpoints.

Editors and watchers report created and changed files here; the first change
to a newly created file gets its copyright notice.
"""

import logging
from typing import Annotated

from fastapi import APIRouter
from fastapi import Depends
from fastapi import HTTPException

from copyright_library.services.project_service import CopyrightProject

from ..dependencies import get_copyright_project
from ..models import FileEventRequest
from ..models import FileEventResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/files", tags=["files"])


@router.post("/created", response_model=FileEventResponse)
async def file_created(
    request: FileEventRequest,
    project: Annotated[CopyrightProject, Depends(get_copyright_project)],
) -> FileEventResponse:
    """Track a newly created file."""
    file = project.resolve_path(request.path)
    project.trigger.file_created(file)
    return FileEventResponse(path=str(file), accepted=True)


@router.post("/changed", response_model=FileEventResponse)
async def file_changed(
    request: FileEventRequest,
    project: Annotated[CopyrightProject, Depends(get_copyright_project)],
) -> FileEventResponse:
    """Report a content change; adds a notice on a tracked file's first edit."""
    file = project.resolve_path(request.path)
    try:
        accepted = project.trigger.document_changed(file)
    except OSError as exc:
        logger.error(f"Failed to add notice to {file}: {exc}")
        raise HTTPException(status_code=500, detail=f"Failed to update {request.path}") from exc
    return FileEventResponse(path=str(file), accepted=accepted)


@router.post("/apply", response_model=FileEventResponse)
async def apply_notice(
    request: FileEventRequest,
    project: Annotated[CopyrightProject, Depends(get_copyright_project)],
) -> FileEventResponse:
    """Add the applicable notice to a file now.

    Raises:
        HTTPException: 404 if the file does not exist
    """
    file = project.resolve_path(request.path)
    if not file.is_file():
        raise HTTPException(status_code=404, detail=f"File not found: {request.path}")

    try:
        updated = project.apply(file)
    except (OSError, ValueError) as exc:
        logger.error(f"Failed to add notice to {file}: {exc}")
        raise HTTPException(status_code=500, detail=f"Failed to update {request.path}") from exc
    return FileEventResponse(path=str(file), accepted=updated)
