"""Scope service.

Handles loading named scopes and turning them into file predicates.
"""

import logging
from collections.abc import Callable
from fnmatch import fnmatchcase
from pathlib import Path

import yaml

from copyright_library.models.scopes import ScopeDefinition
from copyright_library.models.scopes import ScopesConfig

logger = logging.getLogger(__name__)

ScopePredicate = Callable[[Path], bool]


class ScopeService:
    """Service for loading scopes and matching files against them."""

    def __init__(self, project_root: Path, scopes_file: Path):
        """Initialize scope service.

        Args:
            project_root: Root that scope patterns are relative to
            scopes_file: YAML file holding the scope definitions
        """
        self.project_root = Path(project_root).resolve()
        self.scopes_file = scopes_file
        self._scopes: dict[str, ScopeDefinition] | None = None

    def load_scopes(self, force_reload: bool = False) -> dict[str, ScopeDefinition]:
        """Load scopes from scopes.yaml.

        Args:
            force_reload: Force reload even if already cached

        Returns:
            Dictionary mapping scope name to ScopeDefinition
        """
        if self._scopes is not None and not force_reload:
            return self._scopes

        if not self.scopes_file.exists():
            logger.info(f"No scopes.yaml found at {self.scopes_file}, using empty scopes")
            self._scopes = {}
            return self._scopes

        try:
            data = yaml.safe_load(self.scopes_file.read_text(encoding="utf-8")) or {}
            config = ScopesConfig(**data)

            self._scopes = {scope.name: scope for scope in config.scopes}

            logger.info(f"Loaded {len(self._scopes)} scopes from {self.scopes_file}")
            for name, scope in self._scopes.items():
                logger.debug(f"  Scope '{name}': include={scope.include} exclude={scope.exclude}")

            return self._scopes

        except Exception as e:
            logger.error(f"Failed to load scopes from {self.scopes_file}: {e}")
            self._scopes = {}
            return self._scopes

    def list_scopes(self) -> list[ScopeDefinition]:
        return list(self.load_scopes().values())

    def define_scope(self, scope: ScopeDefinition) -> None:
        """Add or replace a scope definition (in memory until save())."""
        self.load_scopes()[scope.name] = scope

    def remove_scope(self, name: str) -> bool:
        return self.load_scopes().pop(name, None) is not None

    def save(self) -> None:
        """Write the scope definitions back to scopes.yaml."""
        config = ScopesConfig(scopes=self.list_scopes())
        self.scopes_file.parent.mkdir(parents=True, exist_ok=True)
        self.scopes_file.write_text(
            yaml.safe_dump(config.model_dump(), default_flow_style=False, sort_keys=False),
            encoding="utf-8",
        )
        logger.info(f"Saved {len(config.scopes)} scopes to {self.scopes_file}")

    def relative_path(self, file: Path) -> str | None:
        """Project-relative POSIX path, or None for files outside the project."""
        try:
            return Path(file).resolve().relative_to(self.project_root).as_posix()
        except ValueError:
            return None

    def get_predicate(self, name: str) -> ScopePredicate | None:
        """Predicate for a named scope.

        Returns:
            Callable telling whether a file is in the scope, or None if the
            scope is not defined
        """
        scope = self.load_scopes().get(name)
        if scope is None:
            return None

        def contains(file: Path) -> bool:
            relative = self.relative_path(file)
            if relative is None:
                return False
            if not any(fnmatchcase(relative, pattern) for pattern in scope.include):
                return False
            return not any(fnmatchcase(relative, pattern) for pattern in scope.exclude)

        return contains
