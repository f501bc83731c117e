"""Scheme wrappers: live schemes and lazily deserialized scheme records.

A lazy wrapper keeps the raw record until its scheme is first read. The first
reader takes the data holder out of its slot (a single atomic `list.pop`),
deserializes it and publishes the result; everyone else gets the published
instance. Readers that arrive after realization never block.
"""

from __future__ import annotations

import hashlib
import threading
import xml.etree.ElementTree as ET
from abc import ABC
from abc import abstractmethod
from collections.abc import Callable
from typing import Generic
from typing import TypeVar

from copyright_library.errors import InvalidDataError

T = TypeVar("T")

SchemeWriter = Callable[[T], ET.Element]
SchemeReader = Callable[[ET.Element], T]


def element_digest(element: ET.Element) -> str:
    """SHA-256 of an element's canonical XML form."""
    canonical = ET.canonicalize(ET.tostring(element, encoding="unicode"), strip_text=True)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


class SchemeDataHolder:
    """Raw, not yet deserialized scheme record."""

    def __init__(self, element: ET.Element, on_digest: Callable[[str], None] | None = None) -> None:
        """Initialize data holder.

        Args:
            element: Record as read from the store
            on_digest: Called with the new digest whenever it is updated
        """
        self._element = element
        self._on_digest = on_digest
        self.digest: str | None = None

    def read(self) -> ET.Element:
        return self._element

    def update_digest(self, element: ET.Element) -> str:
        self.digest = element_digest(element)
        if self._on_digest is not None:
            self._on_digest(self.digest)
        return self.digest


class SchemeWrapper(ABC, Generic[T]):
    """Named handle on a scheme."""

    def __init__(self, name: str) -> None:
        self.name = name

    @property
    @abstractmethod
    def scheme(self) -> T:
        """The live scheme, deserialized on demand."""

    @property
    @abstractmethod
    def is_realized(self) -> bool:
        """Whether the live scheme exists in memory."""

    @abstractmethod
    def write_scheme(self) -> ET.Element:
        """Persistable form of the scheme."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, realized={self.is_realized})"


class InitializedSchemeWrapper(SchemeWrapper[T]):
    """Wrapper around a scheme created in memory."""

    def __init__(self, scheme: T, writer: SchemeWriter, name: str | None = None) -> None:
        super().__init__(name if name is not None else getattr(scheme, "name"))
        self._scheme = scheme
        self._writer = writer

    @property
    def scheme(self) -> T:
        return self._scheme

    @property
    def is_realized(self) -> bool:
        return True

    def write_scheme(self) -> ET.Element:
        return self._writer(self._scheme)


class LazySchemeWrapper(SchemeWrapper[T]):
    """Wrapper that deserializes its record on first access.

    States:
        Unrealized: holds the data holder, `write_scheme()` returns the raw record
        Realized: holds the scheme and the digest of its last written form
    """

    def __init__(
        self,
        name: str,
        data_holder: SchemeDataHolder,
        writer: SchemeWriter,
        reader: SchemeReader,
        sub_state_tag: str = "copyright",
    ) -> None:
        super().__init__(name)
        self._holder_slot: list[SchemeDataHolder] = [data_holder]
        self._writer = writer
        self._reader = reader
        self._sub_state_tag = sub_state_tag
        self._scheme: T | None = None
        self._error: Exception | None = None
        self._realized = threading.Event()
        self.digest: str | None = None

    @property
    def is_realized(self) -> bool:
        return self._realized.is_set() and self._error is None

    @property
    def scheme(self) -> T:
        if not self._realized.is_set():
            try:
                holder = self._holder_slot.pop()
            except IndexError:
                # Another thread owns the holder; wait for it to publish.
                self._realized.wait()
            else:
                self._realize(holder)

        if self._error is not None:
            raise InvalidDataError(f"Failed to load scheme '{self.name}': {self._error}") from self._error
        return self._scheme

    def _realize(self, holder: SchemeDataHolder) -> None:
        try:
            element = holder.read().find(self._sub_state_tag)
            if element is None:
                raise InvalidDataError(f"Record has no <{self._sub_state_tag}> element")
            scheme = self._reader(element)
            self.digest = holder.update_digest(self._writer(scheme))
            self._scheme = scheme
        except Exception as e:
            self._error = e
        finally:
            self._realized.set()

    def write_scheme(self) -> ET.Element:
        try:
            holder = self._holder_slot[0]
        except IndexError:
            return self._writer(self.scheme)
        return holder.read()

    def is_modified(self) -> bool:
        """Whether the live scheme differs from its last written form."""
        if not self.is_realized:
            return False
        return element_digest(self._writer(self._scheme)) != self.digest
