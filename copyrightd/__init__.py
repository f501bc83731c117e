"""copyrightd: HTTP and CLI surface for copyright_library."""

__version__ = "0.1.0"
