"""New-file notice trigger.

Files reported as created are remembered; the first content change to such a
file asks the registry for its profile and hands the file to the notice
processor. Resolution and insertion run through an injected dispatch callable
so callers decide when the work happens.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Callable
from functools import partial
from pathlib import Path
from typing import Protocol

from copyright_library.file_types import FileTypeRegistry
from copyright_library.models.profiles import CopyrightProfile
from copyright_library.registry import CopyrightManager

logger = logging.getLogger(__name__)

Dispatch = Callable[[Callable[[], None]], None]
ModuleResolver = Callable[[Path], str | None]


class NoticeProcessor(Protocol):
    def run(self, file: Path, profile: CopyrightProfile, module: str | None = None) -> bool: ...


def run_inline(task: Callable[[], None]) -> None:
    task()


def project_module_resolver(project_root: Path) -> ModuleResolver:
    """Module of a file: its top-level directory in the project.

    Files directly in the project root belong to the project's own module;
    files outside the project have no module.
    """
    root = Path(project_root).resolve()

    def resolve(file: Path) -> str | None:
        try:
            relative = Path(file).resolve().relative_to(root)
        except ValueError:
            return None
        return relative.parts[0] if len(relative.parts) > 1 else root.name

    return resolve


class NewFileTracker:
    """Thread-safe set of files created but not yet edited."""

    def __init__(self) -> None:
        self._files: set[Path] = set()
        self._lock = threading.Lock()

    def track(self, file: Path) -> None:
        with self._lock:
            self._files.add(Path(file).resolve())

    def poll(self, file: Path) -> bool:
        """Forget a file, reporting whether it was being tracked."""
        key = Path(file).resolve()
        with self._lock:
            if key in self._files:
                self._files.remove(key)
                return True
            return False

    def clear(self) -> None:
        with self._lock:
            self._files.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._files)


class NewFileNoticeTrigger:
    """Adds notices to newly created files on their first edit."""

    def __init__(
        self,
        manager: CopyrightManager,
        processor: NoticeProcessor,
        module_resolver: ModuleResolver,
        file_types: FileTypeRegistry | None = None,
        tracker: NewFileTracker | None = None,
        dispatch: Dispatch = run_inline,
    ) -> None:
        self.manager = manager
        self.processor = processor
        self.module_resolver = module_resolver
        self.file_types = file_types or manager.file_types
        self.tracker = tracker or NewFileTracker()
        self.dispatch = dispatch

    def file_created(self, file: Path) -> None:
        self.tracker.track(file)

    def document_changed(self, file: Path) -> bool:
        """Handle a content change.

        Returns:
            True if notice processing was dispatched
        """
        file = Path(file)
        module = self.module_resolver(file)
        if module is None:
            return False
        if not self.tracker.poll(file) or not self.file_types.is_supported(file) or not file.is_file():
            return False

        self.dispatch(partial(self._apply, file, module))
        return True

    def _apply(self, file: Path, module: str) -> None:
        if not file.is_file():
            return
        if not os.access(file, os.W_OK):
            logger.debug(f"Not writable, skipping notice: {file}")
            return

        profile = self.manager.get_copyright_options(file)
        if profile is not None:
            self.processor.run(file, profile, module)

    def dispose(self) -> None:
        self.tracker.clear()
