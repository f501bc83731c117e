"""API models for copyrightd.

This module defines request and response models for the REST API.
"""

from .requests import DefaultProfileRequest
from .requests import FileEventRequest
from .requests import MapScopeRequest
from .requests import ProfileRequest
from .responses import FileEventResponse
from .responses import MappingEntry
from .responses import MappingsResponse
from .responses import ProfileResponse
from .responses import ResolveResponse
from .responses import StatusResponse

__all__ = [
    "ProfileRequest",
    "MapScopeRequest",
    "DefaultProfileRequest",
    "FileEventRequest",
    "ProfileResponse",
    "MappingEntry",
    "MappingsResponse",
    "ResolveResponse",
    "FileEventResponse",
    "StatusResponse",
]
