"""Request models for copyrightd API."""

from pydantic import Field

from copyright_library.models.profiles import DEFAULT_KEYWORD
from copyright_library.models.profiles import DEFAULT_NOTICE

from .base import CamelCaseModel


class ProfileRequest(CamelCaseModel):
    """Body for creating or replacing a profile.

    Attributes:
        notice: Notice template text
        keyword: Keyword detecting an existing notice
        allow_replace_regexp: Existing notices matching this may be replaced
    """

    notice: str = Field(default=DEFAULT_NOTICE, description="Notice template text")
    keyword: str = Field(default=DEFAULT_KEYWORD, description="Keyword detecting an existing notice")
    allow_replace_regexp: str | None = Field(default=None, description="Regexp of replaceable notices")


class MapScopeRequest(CamelCaseModel):
    """Body for assigning a profile to a scope."""

    profile: str = Field(..., min_length=1, description="Profile name (need not exist yet)")


class DefaultProfileRequest(CamelCaseModel):
    """Body for setting the default profile."""

    profile: str = Field(..., min_length=1, description="Name of an existing profile")


class FileEventRequest(CamelCaseModel):
    """Body for file events and notice application."""

    path: str = Field(..., min_length=1, description="Absolute or project-relative file path")
