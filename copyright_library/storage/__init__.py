"""Storage module for copyright_library.

Provides XML-based persistence with atomic writes.

Public Interface:
    - SchemeStore: Directory of named profile records
    - save_xml: Save element with atomic write
    - load_xml: Load element with error recovery
    - get_home_dir: Get COPYRIGHTD_HOME
    - get_config_dir: Get config directory
    - get_share_dir: Get data directory
    - get_log_dir: Get log directory
    - get_daemon_log_path: Get the daemon log file
    - get_copyright_dir: Get profile storage directory
"""

from .paths import get_config_dir
from .paths import get_copyright_dir
from .paths import get_daemon_log_path
from .paths import get_home_dir
from .paths import get_log_dir
from .paths import get_share_dir
from .scheme_store import SchemeStore
from .xml_store import load_xml
from .xml_store import save_xml

__all__ = [
    "SchemeStore",
    "save_xml",
    "load_xml",
    "get_home_dir",
    "get_config_dir",
    "get_share_dir",
    "get_log_dir",
    "get_daemon_log_path",
    "get_copyright_dir",
]
