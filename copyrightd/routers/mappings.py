"""Scope assignment API endpoints.

Covers scope → profile mappings, the default profile and resolution of a
file to its profile.
"""

import logging
from typing import Annotated

from fastapi import APIRouter
from fastapi import Depends
from fastapi import HTTPException
from fastapi import Query
from fastapi import Response

from copyright_library.services.project_service import CopyrightProject

from ..dependencies import get_copyright_project
from ..models import DefaultProfileRequest
from ..models import MappingEntry
from ..models import MappingsResponse
from ..models import MapScopeRequest
from ..models import ResolveResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["mappings"])


def _mappings(project: CopyrightProject) -> MappingsResponse:
    manager = project.manager
    return MappingsResponse(
        default_profile=manager.default_copyright_name,
        mappings=[
            MappingEntry(scope=scope, profile=profile) for scope, profile in manager.scope_to_copyright.items()
        ],
    )


@router.get("/mappings", response_model=MappingsResponse)
async def list_mappings(
    project: Annotated[CopyrightProject, Depends(get_copyright_project)],
) -> MappingsResponse:
    """List scope assignments in resolution order."""
    return _mappings(project)


@router.put("/mappings/{scope_name}", response_model=MappingsResponse)
async def map_scope(
    scope_name: str,
    request: MapScopeRequest,
    project: Annotated[CopyrightProject, Depends(get_copyright_project)],
) -> MappingsResponse:
    """Assign a profile to a scope.

    The profile does not have to exist yet; unknown scopes simply never match.
    """
    project.manager.map_copyright(scope_name, request.profile)
    project.save()
    logger.info(f"Mapped scope '{scope_name}' to profile '{request.profile}'")
    return _mappings(project)


@router.delete("/mappings/{scope_name}", status_code=204)
async def unmap_scope(
    scope_name: str,
    project: Annotated[CopyrightProject, Depends(get_copyright_project)],
) -> Response:
    """Remove a scope assignment (no-op if absent)."""
    project.manager.unmap_copyright(scope_name)
    project.save()
    return Response(status_code=204)


@router.delete("/mappings", status_code=204)
async def clear_mappings(
    project: Annotated[CopyrightProject, Depends(get_copyright_project)],
) -> Response:
    """Remove every scope assignment."""
    project.manager.clear_mappings()
    project.save()
    return Response(status_code=204)


@router.put("/default-profile", response_model=MappingsResponse)
async def set_default_profile(
    request: DefaultProfileRequest,
    project: Annotated[CopyrightProject, Depends(get_copyright_project)],
) -> MappingsResponse:
    """Set the profile used when no scope matches.

    Raises:
        HTTPException: 404 if the profile does not exist
    """
    if project.manager.scheme_manager.find_scheme_by_name(request.profile) is None:
        raise HTTPException(status_code=404, detail=f"Profile not found: {request.profile}")

    project.manager.default_copyright_name = request.profile
    project.save()
    return _mappings(project)


@router.delete("/default-profile", status_code=204)
async def clear_default_profile(
    project: Annotated[CopyrightProject, Depends(get_copyright_project)],
) -> Response:
    """Unset the default profile."""
    project.manager.default_copyright = None
    project.save()
    return Response(status_code=204)


@router.get("/resolve", response_model=ResolveResponse)
async def resolve_file(
    path: Annotated[str, Query(min_length=1, description="Absolute or project-relative file path")],
    project: Annotated[CopyrightProject, Depends(get_copyright_project)],
) -> ResolveResponse:
    """Resolve a file to the profile that applies to it."""
    file = project.resolve_path(path)
    profile = project.manager.get_copyright_options(file)
    return ResolveResponse(path=str(file), profile=profile.name if profile is not None else None)
