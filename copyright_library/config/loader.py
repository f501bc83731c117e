"""Configuration loading for copyrightd.

This module handles loading configuration from YAML files
and environment variables.

Contract:
- Inputs: Config file paths, environment variables
- Outputs: CopyrightSettings objects
- Side Effects: Creates default config file if missing
"""

import logging
import os
from pathlib import Path

import yaml

from ..storage.paths import get_config_dir
from .settings import CopyrightSettings

logger = logging.getLogger(__name__)

ENV_PREFIX = "COPYRIGHTD_"

DEFAULT_CONFIG = """# copyrightd configuration

# Server settings
host: "127.0.0.1"
port: 8421
log_level: "info"
workers: 1

# Project whose files receive notices (scopes are relative to it)
# Can be overridden with COPYRIGHTD_PROJECT_PATH environment variable
project_path: "."
# project_name: "my-project"

# Profile storage (default: $COPYRIGHTD_HOME/share/copyright)
# storage_dir: "~/.copyrightd/share/copyright"
"""


def get_config_path() -> Path:
    """Get path to config file.

    Returns:
        Path to copyrightd.yaml in config directory
    """
    return get_config_dir() / "copyrightd.yaml"


def create_default_config() -> None:
    """Create default config file if it doesn't exist."""
    config_path = get_config_path()

    if config_path.exists():
        logger.debug(f"Config file already exists: {config_path}")
        return

    config_path.write_text(DEFAULT_CONFIG, encoding="utf-8")
    logger.info(f"Created default config: {config_path}")


def load_config(config_path: Path | None = None) -> CopyrightSettings:
    """Load configuration from YAML and environment.

    Environment variables take precedence over YAML settings.
    Variables should be prefixed with COPYRIGHTD_ (e.g., COPYRIGHTD_PORT).

    Args:
        config_path: Optional config file path (default: copyrightd.yaml in config dir)

    Returns:
        Validated settings
    """
    if config_path is None:
        config_path = get_config_path()
        if not config_path.exists():
            create_default_config()

    yaml_settings = {}
    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                yaml_settings = yaml.safe_load(f) or {}
            logger.debug(f"Loaded config from {config_path}")
        except Exception as e:
            logger.warning(f"Failed to load config from {config_path}: {e}")
            logger.info("Using default settings and environment variables")

    if not isinstance(yaml_settings, dict):
        logger.warning(f"Ignoring config {config_path}: expected a mapping")
        yaml_settings = {}

    # Only pass YAML values that don't have corresponding env vars
    filtered_yaml = {
        key: value for key, value in yaml_settings.items() if f"{ENV_PREFIX}{key.upper()}" not in os.environ
    }

    settings = CopyrightSettings(**filtered_yaml)

    logger.info(
        f"Configuration loaded: project={settings.project_path}, host={settings.host}, port={settings.port}"
    )

    return settings
