"""Scope models."""

from pydantic import BaseModel
from pydantic import Field


class ScopeDefinition(BaseModel):
    """Named file predicate.

    A file belongs to the scope when its project-relative POSIX path matches
    at least one include pattern and no exclude pattern.

    Attributes:
        name: Scope name referenced by copyright mappings (e.g., "Production")
        include: Glob patterns (e.g., "src/*", "*.py")
        exclude: Glob patterns removed from the scope
    """

    name: str
    include: list[str] = Field(default_factory=list)
    exclude: list[str] = Field(default_factory=list)


class ScopesConfig(BaseModel):
    """Container for scope definitions loaded from scopes.yaml."""

    scopes: list[ScopeDefinition] = Field(default_factory=list)
