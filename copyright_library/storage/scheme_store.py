"""Scheme record store.

Stores one XML record per named scheme in a single directory. This is the
key-value store the scheme manager loads from and saves to.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from pathlib import Path

from .xml_store import load_xml
from .xml_store import save_xml

logger = logging.getLogger(__name__)

SETTINGS_FILE_NAME = "profiles_settings.xml"
RECORD_SUFFIX = ".xml"

_UNSAFE_CHARS = re.compile(r'[\\/:*?"<>|\x00-\x1f]')


class SchemeStore:
    """Directory-backed store of named XML records."""

    def __init__(self, directory: Path, excluded: tuple[str, ...] = (SETTINGS_FILE_NAME,)) -> None:
        """Initialize scheme store.

        Args:
            directory: Directory holding the records
            excluded: File names in the directory that are not scheme records
        """
        self.directory = directory
        self.excluded = excluded
        self.directory.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def sanitize_name(name: str) -> str:
        """Sanitize scheme name for use as filename.

        Args:
            name: Scheme name

        Returns:
            Name with path separators and reserved characters replaced
        """
        safe = _UNSAFE_CHARS.sub("_", name).strip()
        return safe or "_"

    def is_scheme_file(self, file_name: str) -> bool:
        return file_name.endswith(RECORD_SUFFIX) and file_name not in self.excluded

    def path_for(self, name: str) -> Path:
        return self.directory / f"{self.sanitize_name(name)}{RECORD_SUFFIX}"

    def list(self) -> list[str]:
        """List record keys (file names without suffix), sorted."""
        if not self.directory.exists():
            return []
        return sorted(
            path.name[: -len(RECORD_SUFFIX)]
            for path in self.directory.iterdir()
            if path.is_file() and self.is_scheme_file(path.name)
        )

    def get(self, name: str) -> ET.Element | None:
        """Get a record by key.

        Returns:
            Root element of the record, or None if missing or unreadable
        """
        return load_xml(self.path_for(name))

    def put(self, name: str, element: ET.Element) -> None:
        """Write a record, replacing any existing one."""
        save_xml(self.path_for(name), element)
        logger.debug(f"Saved scheme record: {name}")

    def exists(self, name: str) -> bool:
        """Whether any file (record or excluded) already uses this key."""
        return self.path_for(name).exists()

    def remove(self, name: str) -> bool:
        """Delete a record.

        Returns:
            True if a record was deleted
        """
        path = self.path_for(name)
        if not path.exists():
            return False
        path.unlink()
        logger.debug(f"Deleted scheme record: {name}")
        return True
