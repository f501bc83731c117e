"""Copyright profile API endpoints."""

import logging
import re
from typing import Annotated

from fastapi import APIRouter
from fastapi import Depends
from fastapi import HTTPException
from fastapi import Response

from copyright_library.errors import InvalidDataError
from copyright_library.models.profiles import CopyrightProfile
from copyright_library.services.project_service import CopyrightProject

from ..dependencies import get_copyright_project
from ..models import ProfileRequest
from ..models import ProfileResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/profiles", tags=["profiles"])


def _find_profile(project: CopyrightProject, name: str) -> CopyrightProfile:
    try:
        profile = project.manager.find_copyright(name)
    except InvalidDataError as exc:
        logger.error(f"Failed to load profile '{name}': {exc}")
        raise HTTPException(status_code=500, detail=f"Profile '{name}' could not be loaded") from exc
    if profile is None:
        raise HTTPException(status_code=404, detail=f"Profile not found: {name}")
    return profile


@router.get("/", response_model=list[ProfileResponse])
async def list_profiles(
    project: Annotated[CopyrightProject, Depends(get_copyright_project)],
) -> list[ProfileResponse]:
    """List all profiles.

    Returns:
        Profiles in the order they were loaded or added
    """
    return [ProfileResponse.model_validate(profile) for profile in project.manager.get_copyrights()]


@router.get("/{name}", response_model=ProfileResponse)
async def get_profile(
    name: str,
    project: Annotated[CopyrightProject, Depends(get_copyright_project)],
) -> ProfileResponse:
    """Get a profile by name.

    Raises:
        HTTPException: 404 if the profile does not exist
    """
    return ProfileResponse.model_validate(_find_profile(project, name))


@router.put("/{name}", response_model=ProfileResponse)
async def put_profile(
    name: str,
    request: ProfileRequest,
    project: Annotated[CopyrightProject, Depends(get_copyright_project)],
) -> ProfileResponse:
    """Create a profile, or overwrite an existing one in place.

    Raises:
        HTTPException: 400 for an invalid replace regexp, 500 if the existing
            profile can't be loaded
    """
    if request.allow_replace_regexp:
        try:
            re.compile(request.allow_replace_regexp)
        except re.error as exc:
            raise HTTPException(status_code=400, detail=f"Invalid allowReplaceRegexp: {exc}") from exc

    incoming = CopyrightProfile(name=name, **request.model_dump())
    try:
        project.manager.replace_copyright(name, incoming)
    except InvalidDataError as exc:
        logger.error(f"Failed to replace profile '{name}': {exc}")
        raise HTTPException(status_code=500, detail=f"Profile '{name}' could not be loaded") from exc

    project.save()
    logger.info(f"Saved profile '{name}'")
    return ProfileResponse.model_validate(_find_profile(project, name))


@router.delete("/{name}", status_code=204)
async def delete_profile(
    name: str,
    project: Annotated[CopyrightProject, Depends(get_copyright_project)],
) -> Response:
    """Delete a profile and every scope assignment pointing at it.

    Raises:
        HTTPException: 404 if the profile does not exist
    """
    wrapper = project.manager.scheme_manager.find_scheme_by_name(name)
    if wrapper is None:
        raise HTTPException(status_code=404, detail=f"Profile not found: {name}")

    project.manager.remove_copyright(CopyrightProfile(name=name))
    project.save()
    logger.info(f"Deleted profile '{name}'")
    return Response(status_code=204)
