"""Project wiring.

Builds the scope service, copyright registry, notice processor and new-file
trigger for one project from settings.
"""

import logging
from pathlib import Path

from copyright_library.config.settings import CopyrightSettings
from copyright_library.file_types import FileTypeRegistry
from copyright_library.notices import UpdateCopyrightProcessor
from copyright_library.registry import CopyrightManager
from copyright_library.storage.paths import get_copyright_dir
from copyright_library.tracking import Dispatch
from copyright_library.tracking import NewFileNoticeTrigger
from copyright_library.tracking import project_module_resolver
from copyright_library.tracking import run_inline

from .scope_service import ScopeService

logger = logging.getLogger(__name__)

SCOPES_FILE_NAME = "scopes.yaml"


class CopyrightProject:
    """All copyright services for one project."""

    def __init__(self, settings: CopyrightSettings, dispatch: Dispatch = run_inline) -> None:
        """Initialize project services.

        Args:
            settings: Loaded settings
            dispatch: How the new-file trigger schedules notice insertion
        """
        self.settings = settings
        self.project_root = Path(settings.project_path)
        self.storage_dir = Path(settings.storage_dir) if settings.storage_dir else get_copyright_dir()
        self.storage_dir.mkdir(parents=True, exist_ok=True)

        self.file_types = FileTypeRegistry()
        self.scopes = ScopeService(self.project_root, self.storage_dir / SCOPES_FILE_NAME)
        self.manager = CopyrightManager(self.storage_dir, self.scopes.get_predicate, self.file_types)
        self.processor = UpdateCopyrightProcessor(
            self.manager.options,
            self.file_types,
            project_name=settings.effective_project_name,
        )
        self.trigger = NewFileNoticeTrigger(
            self.manager,
            self.processor,
            project_module_resolver(self.project_root),
            file_types=self.file_types,
            dispatch=dispatch,
        )

        logger.info(
            f"Copyright project '{settings.effective_project_name}' at {self.project_root} "
            f"(storage: {self.storage_dir}, profiles: {len(self.manager.scheme_manager.all_schemes)})"
        )

    def resolve_path(self, path: str | Path) -> Path:
        """Absolute path for a project-relative or absolute path."""
        path = Path(path).expanduser()
        return path if path.is_absolute() else (self.project_root / path).resolve()

    def apply(self, path: str | Path) -> bool:
        """Add the applicable notice to a file right away.

        Returns:
            True if the file was rewritten
        """
        file = self.resolve_path(path)
        profile = self.manager.get_copyright_options(file)
        if profile is None:
            return False
        module = project_module_resolver(self.project_root)(file)
        return self.processor.run(file, profile, module)

    def save(self) -> None:
        self.manager.save()

    def close(self) -> None:
        self.trigger.dispose()
