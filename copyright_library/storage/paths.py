"""Path resolution for copyrightd storage locations.

This module provides path resolution based on COPYRIGHTD_HOME environment variable,
following XDG-like directory structure within that root.

Contract:
- Inputs: Environment variables (COPYRIGHTD_HOME)
- Outputs: Resolved Path objects
- Side Effects: Creates directories if they don't exist
"""

import os
from pathlib import Path


def get_home_dir() -> Path:
    """Get COPYRIGHTD_HOME from environment.

    Returns:
        Path to root directory (default: .copyrightd)
    """
    root = os.environ.get("COPYRIGHTD_HOME", ".copyrightd")
    return Path(root).resolve()


def get_config_dir() -> Path:
    """Get configuration directory.

    Returns:
        Path to config directory ($COPYRIGHTD_HOME/config)
    """
    config_dir: Path = get_home_dir() / "config"

    env_override: str | None = os.environ.get("COPYRIGHTD_CONFIG_DIR")
    if env_override is not None:
        config_dir = Path(env_override).resolve()

    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_share_dir() -> Path:
    """Get persistent data directory.

    Returns:
        Path to share directory ($COPYRIGHTD_HOME/share)

    Environment Variables:
        COPYRIGHTD_SHARE_DIR: Override share directory location
        (falls back to $COPYRIGHTD_HOME/share if not set)
    """
    share_dir: Path = get_home_dir() / "share"

    env_override: str | None = os.environ.get("COPYRIGHTD_SHARE_DIR")
    if env_override is not None:
        share_dir = Path(env_override).resolve()

    share_dir.mkdir(parents=True, exist_ok=True)
    return share_dir


def get_log_dir() -> Path:
    """Get log directory.

    Returns:
        Path to log directory ($COPYRIGHTD_HOME/logs/copyrightd)
    """
    log_dir: Path = get_home_dir() / "logs" / "copyrightd"

    env_override: str | None = os.environ.get("COPYRIGHTD_LOG_DIR")
    if env_override is not None:
        log_dir = Path(env_override).resolve()

    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def get_copyright_dir() -> Path:
    """Get copyright profile storage directory.

    Holds one XML record per profile plus profiles_settings.xml.

    Returns:
        Path to profile storage ($COPYRIGHTD_HOME/share/copyright)
    """
    copyright_dir = get_share_dir() / "copyright"
    copyright_dir.mkdir(parents=True, exist_ok=True)
    return copyright_dir


def get_daemon_log_path() -> Path:
    """Get the daemon's log file.

    Returns:
        Path to daemon.log in the log directory
    """
    return get_log_dir() / "daemon.log"
