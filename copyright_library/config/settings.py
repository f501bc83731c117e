"""Settings models for copyrightd.

This module defines the configuration structure for the daemon and the
project whose copyright profiles it manages.

Contract:
- Inputs: Environment variables, YAML files
- Outputs: Validated settings objects
- Side Effects: None (read-only)
"""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class CopyrightSettings(BaseSettings):
    """Configuration for copyrightd.

    Attributes:
        host: Listen address (default: 127.0.0.1)
        port: Listen port (default: 8421)
        log_level: Logging level (default: info)
        workers: Number of workers (default: 1)
        project_path: Project root that scopes and modules are relative to (default: .)
        project_name: Name used for $project.name (default: project directory name)
        storage_dir: Profile storage directory (default: $COPYRIGHTD_HOME/share/copyright)

    Example:
        >>> settings = CopyrightSettings()
        >>> assert settings.port == 8421
    """

    model_config = SettingsConfigDict(
        env_prefix="COPYRIGHTD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = "127.0.0.1"
    port: int = 8421
    log_level: str = "info"
    workers: int = 1

    project_path: str = "."
    project_name: str | None = None
    storage_dir: str | None = None

    @field_validator("project_path", "storage_dir")
    @classmethod
    def expand_and_resolve_path(cls, v: str | None) -> str | None:
        """Expand ~ and resolve to absolute path.

        Args:
            v: Path string (may contain ~ or be relative)

        Returns:
            Absolute path as string
        """
        if v is None:
            return None
        return str(Path(v).expanduser().resolve())

    @property
    def effective_project_name(self) -> str:
        return self.project_name or Path(self.project_path).name
