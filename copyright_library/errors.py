"""Error types for copyright_library.

Persistence code raises these; the registry and scheme manager catch and log
them so that a broken record never takes the host process down.
"""


class CopyrightError(Exception):
    """Base class for copyright_library errors."""


class InvalidDataError(CopyrightError):
    """Persisted data could not be read back into a model."""


class WriteExternalError(CopyrightError):
    """A model could not be written to its persisted form."""
