"""Response models for copyrightd API."""

from pydantic import Field

from .base import CamelCaseModel


class ProfileResponse(CamelCaseModel):
    """A copyright profile.

    Attributes:
        name: Profile name
        notice: Notice template text
        keyword: Keyword detecting an existing notice
        allow_replace_regexp: Regexp of replaceable notices
    """

    name: str = Field(..., description="Profile name")
    notice: str = Field(..., description="Notice template text")
    keyword: str = Field(..., description="Keyword detecting an existing notice")
    allow_replace_regexp: str | None = Field(default=None, description="Regexp of replaceable notices")


class MappingEntry(CamelCaseModel):
    """One scope → profile assignment."""

    scope: str = Field(..., description="Scope name")
    profile: str = Field(..., description="Profile name")


class MappingsResponse(CamelCaseModel):
    """Scope assignments in resolution order, plus the default profile."""

    default_profile: str | None = Field(default=None, description="Default profile name")
    mappings: list[MappingEntry] = Field(default_factory=list, description="Assignments in priority order")


class ResolveResponse(CamelCaseModel):
    """Profile that applies to a file."""

    path: str = Field(..., description="Resolved absolute path")
    profile: str | None = Field(default=None, description="Applicable profile name, if any")


class FileEventResponse(CamelCaseModel):
    """Outcome of a file event or notice application."""

    path: str = Field(..., description="Resolved absolute path")
    accepted: bool = Field(..., description="Whether the event led to (or is tracked for) notice processing")


class StatusResponse(CamelCaseModel):
    """Daemon status."""

    status: str = Field(..., description="Daemon status")
    version: str = Field(..., description="Daemon version")
    uptime_seconds: float = Field(..., description="Seconds since start")
    project_path: str = Field(..., description="Project root")
    profile_count: int = Field(..., description="Number of profiles")
    has_assignments: bool = Field(..., description="Whether any scope or default profile is assigned")
