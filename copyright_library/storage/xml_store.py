"""XML file persistence with atomic writes.

Contract:
- Inputs: Element trees, file paths
- Outputs: Parsed Element trees (None when missing or unreadable)
- Side Effects: Writes files via temp file + rename
"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

import defusedxml.ElementTree as SafeET

logger = logging.getLogger(__name__)


def element_to_bytes(element: ET.Element) -> bytes:
    """Serialize an element to indented UTF-8 bytes with an XML declaration."""
    tree = ET.ElementTree(element)
    ET.indent(tree, space="  ")
    return ET.tostring(element, encoding="utf-8", xml_declaration=True)


def save_xml(path: Path, element: ET.Element) -> None:
    """Save element as XML file atomically.

    Args:
        path: Target file path
        element: Root element to write

    Raises:
        RuntimeError: If the file could not be written
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_path = path.with_suffix(".tmp")
    try:
        temp_path.write_bytes(element_to_bytes(element))
        temp_path.replace(path)
        logger.debug(f"Saved XML to {path}")
    except Exception as e:
        if temp_path.exists():
            temp_path.unlink()
        raise RuntimeError(f"Failed to save XML to {path}: {e}") from e


def load_xml(path: Path) -> ET.Element | None:
    """Load XML file or return None if not found or unreadable.

    Args:
        path: File path to load

    Returns:
        Root element, or None if the file doesn't exist or can't be parsed
    """
    if not path.exists():
        return None
    try:
        return SafeET.parse(path).getroot()
    except Exception as e:
        logger.warning(f"Failed to load XML from {path}: {e}")
        return None
