"""
Unit tests for storage layer (paths, xml_store and scheme records).

Tests path resolution, XML persistence, atomic writes and record naming.
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from unittest.mock import patch

import pytest

from copyright_library.storage import paths
from copyright_library.storage import xml_store
from copyright_library.storage.scheme_store import SchemeStore


@pytest.mark.unit
class TestPaths:
    """Test path resolution functions."""

    def test_get_home_dir_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("COPYRIGHTD_HOME", raising=False)
        assert paths.get_home_dir() == Path(".copyrightd").resolve()

    def test_get_home_dir_custom(self, mock_storage_env: Path) -> None:
        assert paths.get_home_dir() == mock_storage_env

    def test_get_config_dir_creates_directory(self, mock_storage_env: Path) -> None:
        config_dir = paths.get_config_dir()
        assert config_dir.is_dir()
        assert config_dir == mock_storage_env / "config"

    def test_get_log_dir_creates_directory(self, mock_storage_env: Path) -> None:
        log_dir = paths.get_log_dir()
        assert log_dir.is_dir()
        assert log_dir.name == "copyrightd"

    def test_get_daemon_log_path_in_log_dir(self, mock_storage_env: Path) -> None:
        log_path = paths.get_daemon_log_path()
        assert log_path == mock_storage_env / "logs" / "copyrightd" / "daemon.log"
        assert log_path.parent.is_dir()

    def test_get_copyright_dir_under_share(self, mock_storage_env: Path) -> None:
        copyright_dir = paths.get_copyright_dir()
        assert copyright_dir.is_dir()
        assert copyright_dir == mock_storage_env / "share" / "copyright"

    def test_share_dir_override(self, mock_storage_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        override = mock_storage_env / "elsewhere"
        monkeypatch.setenv("COPYRIGHTD_SHARE_DIR", str(override))

        assert paths.get_share_dir() == override
        assert override.is_dir()


@pytest.mark.unit
class TestXmlStore:
    """Test XML storage operations."""

    def test_save_and_load(self, tmp_path: Path) -> None:
        root = ET.Element("settings", default="MIT")
        ET.SubElement(root, "module2copyright")
        path = tmp_path / "nested" / "state.xml"

        xml_store.save_xml(path, root)
        loaded = xml_store.load_xml(path)

        assert loaded.tag == "settings"
        assert loaded.get("default") == "MIT"
        assert loaded.find("module2copyright") is not None
        assert path.read_bytes().startswith(b"<?xml")

    def test_load_missing_returns_none(self, tmp_path: Path) -> None:
        assert xml_store.load_xml(tmp_path / "missing.xml") is None

    def test_load_corrupt_returns_none(self, tmp_path: Path, caplog) -> None:
        path = tmp_path / "broken.xml"
        path.write_text("<settings><unclosed>")

        assert xml_store.load_xml(path) is None
        assert "Failed to load XML" in caplog.text

    def test_load_rejects_entity_expansion(self, tmp_path: Path) -> None:
        path = tmp_path / "bomb.xml"
        path.write_text('<?xml version="1.0"?><!DOCTYPE x [<!ENTITY a "aaaa">]><x>&a;</x>')

        assert xml_store.load_xml(path) is None

    def test_save_failure_cleans_temp_file(self, tmp_path: Path) -> None:
        path = tmp_path / "state.xml"

        with patch.object(Path, "replace", side_effect=OSError("disk full")):
            with pytest.raises(RuntimeError, match="Failed to save XML"):
                xml_store.save_xml(path, ET.Element("settings"))

        assert not path.exists()
        assert not path.with_suffix(".tmp").exists()


@pytest.mark.unit
class TestSchemeStore:
    """Test per-scheme record files."""

    def test_sanitize_name(self) -> None:
        assert SchemeStore.sanitize_name("Apache 2.0") == "Apache 2.0"
        assert SchemeStore.sanitize_name("a/b:c") == "a_b_c"
        assert SchemeStore.sanitize_name("   ") == "_"

    def test_list_excludes_settings_file(self, tmp_path: Path) -> None:
        store = SchemeStore(tmp_path)
        store.put("MIT", ET.Element("component"))
        xml_store.save_xml(tmp_path / "profiles_settings.xml", ET.Element("component"))
        (tmp_path / "notes.txt").write_text("not a record")

        assert store.list() == ["MIT"]

    def test_remove(self, tmp_path: Path) -> None:
        store = SchemeStore(tmp_path)
        store.put("MIT", ET.Element("component"))

        assert store.remove("MIT") is True
        assert store.remove("MIT") is False
        assert store.get("MIT") is None
