"""Scheme manager: named schemes backed by a record store.

Loads records lazily, keeps the set of schemes in insertion order and writes
back only records whose content changed since they were loaded or saved.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Callable
from typing import Generic
from typing import TypeVar

from copyright_library.storage.scheme_store import SchemeStore

from .wrappers import LazySchemeWrapper
from .wrappers import SchemeDataHolder
from .wrappers import SchemeReader
from .wrappers import SchemeWrapper
from .wrappers import SchemeWriter
from .wrappers import element_digest

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SchemeManager(Generic[T]):
    """Named schemes persisted one record per scheme."""

    def __init__(
        self,
        store: SchemeStore,
        writer: SchemeWriter,
        reader: SchemeReader,
        sub_state_tag: str,
        name_reader: Callable[[ET.Element], str | None] | None = None,
    ) -> None:
        """Initialize scheme manager.

        Args:
            store: Record store (list/get/put/remove)
            writer: Serializes a live scheme to its record
            reader: Builds a live scheme from the record's sub-state element
            sub_state_tag: Tag of the scheme element inside a record
            name_reader: Reads the scheme name from a raw record without deserializing it
        """
        self.store = store
        self.writer = writer
        self.reader = reader
        self.sub_state_tag = sub_state_tag
        self.name_reader = name_reader

        self._schemes: dict[str, SchemeWrapper[T]] = {}
        self._keys: dict[str, str] = {}
        self._digests: dict[str, str] = {}
        self._removed: dict[str, str] = {}

    def load_schemes(self) -> list[SchemeWrapper[T]]:
        """Load every record in the store as a lazy scheme.

        Unreadable records and duplicate names are logged and skipped.
        """
        self._schemes.clear()
        self._keys.clear()
        self._digests.clear()
        self._removed.clear()

        for key in self.store.list():
            element = self.store.get(key)
            if element is None:
                logger.warning(f"Skipping unreadable scheme record: {key}")
                continue

            name = (self.name_reader(element) if self.name_reader else None) or key
            if name in self._schemes:
                logger.warning(f"Duplicate scheme name '{name}' in record {key}, skipping")
                continue

            holder = SchemeDataHolder(element, on_digest=self._digest_updater(name))
            self._schemes[name] = LazySchemeWrapper(name, holder, self.writer, self.reader, self.sub_state_tag)
            self._keys[name] = key
            self._digests[name] = element_digest(element)

        logger.info(f"Loaded {len(self._schemes)} schemes from {self.store.directory}")
        return self.all_schemes

    def _digest_updater(self, name: str) -> Callable[[str], None]:
        def update(digest: str) -> None:
            if name in self._digests:
                self._digests[name] = digest

        return update

    def _allocate_key(self, name: str) -> str:
        """Record key for a scheme that has none yet.

        Names that sanitize to the same file name (e.g. "a:b" and "a*b") get
        numbered keys so that no two schemes share a record.
        """
        used = set(self._keys.values())
        base = self.store.sanitize_name(name)
        key = base
        suffix = 2
        while key in used or self.store.exists(key):
            key = f"{base}_{suffix}"
            suffix += 1
        return key

    @property
    def all_schemes(self) -> list[SchemeWrapper[T]]:
        return list(self._schemes.values())

    def find_scheme_by_name(self, name: str) -> SchemeWrapper[T] | None:
        return self._schemes.get(name)

    def add_scheme(self, wrapper: SchemeWrapper[T]) -> None:
        """Add a scheme, replacing any scheme with the same name."""
        if wrapper.name in self._removed:
            self._keys[wrapper.name] = self._removed.pop(wrapper.name)
        self._schemes[wrapper.name] = wrapper

    def remove_scheme(self, name: str) -> SchemeWrapper[T] | None:
        """Remove a scheme; its record is deleted on the next save."""
        wrapper = self._schemes.pop(name, None)
        if wrapper is not None and name in self._keys:
            self._removed[name] = self._keys.pop(name)
            self._digests.pop(name, None)
        return wrapper

    def save(self) -> None:
        """Write changed records and delete removed ones.

        Failures are logged per record; nothing is retried.
        """
        for name, key in list(self._removed.items()):
            try:
                self.store.remove(key)
                del self._removed[name]
            except OSError as e:
                logger.error(f"Failed to delete scheme record {key}: {e}")

        for name, wrapper in self._schemes.items():
            try:
                element = wrapper.write_scheme()
            except Exception as e:
                logger.error(f"Failed to serialize scheme '{name}': {e}")
                continue

            digest = element_digest(element)
            if self._digests.get(name) == digest:
                continue

            key = self._keys.get(name) or self._allocate_key(name)
            try:
                self.store.put(key, element)
            except Exception as e:
                logger.error(f"Failed to save scheme '{name}': {e}")
                continue
            self._keys[name] = key
            self._digests[name] = digest
