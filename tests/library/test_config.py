"""
Unit tests for configuration loading.

Tests config file creation, loading from YAML, and environment variable overrides.
"""

from pathlib import Path

import pytest

from copyright_library.config import loader
from copyright_library.config.settings import CopyrightSettings


@pytest.mark.unit
class TestConfigLoader:
    """Test configuration loading functions."""

    def test_get_config_path_returns_copyrightd_yaml(self, mock_storage_env: Path) -> None:
        config_path = loader.get_config_path()

        assert config_path.name == "copyrightd.yaml"
        assert config_path.parent == mock_storage_env / "config"

    def test_create_default_config_creates_file(self, mock_storage_env: Path) -> None:
        config_path = loader.get_config_path()

        loader.create_default_config()

        assert config_path.is_file()
        content = config_path.read_text()
        assert "port:" in content
        assert "project_path:" in content

    def test_create_default_config_is_idempotent(self, mock_storage_env: Path) -> None:
        """Test create_default_config doesn't overwrite existing config."""
        config_path = loader.get_config_path()
        loader.create_default_config()

        custom_content = "# Custom config\nhost: custom\n"
        config_path.write_text(custom_content)
        loader.create_default_config()

        assert config_path.read_text() == custom_content

    def test_load_config_creates_default_if_missing(self, mock_storage_env: Path) -> None:
        config_path = loader.get_config_path()
        assert not config_path.exists()

        settings = loader.load_config()

        assert config_path.exists()
        assert isinstance(settings, CopyrightSettings)
        assert settings.port == 8421

    def test_load_config_parses_yaml_settings(self, mock_storage_env: Path, tmp_path: Path) -> None:
        loader.get_config_path().write_text(
            f'host: "0.0.0.0"\nport: 9999\nlog_level: "debug"\nproject_path: "{tmp_path}"\nproject_name: demo\n'
        )

        settings = loader.load_config()

        assert settings.host == "0.0.0.0"
        assert settings.port == 9999
        assert settings.log_level == "debug"
        assert settings.project_path == str(tmp_path.resolve())
        assert settings.effective_project_name == "demo"

    def test_load_config_env_overrides_yaml(self, mock_storage_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        loader.get_config_path().write_text("host: 127.0.0.1\nport: 8421\n")

        monkeypatch.setenv("COPYRIGHTD_HOST", "0.0.0.0")
        monkeypatch.setenv("COPYRIGHTD_PORT", "9999")

        settings = loader.load_config()

        assert settings.host == "0.0.0.0"
        assert settings.port == 9999

    def test_load_config_handles_invalid_yaml(self, mock_storage_env: Path, caplog) -> None:
        loader.get_config_path().write_text("{{invalid yaml content\n")

        settings = loader.load_config()

        assert isinstance(settings, CopyrightSettings)
        assert "Failed to load config" in caplog.text

    def test_load_config_ignores_non_mapping_yaml(self, mock_storage_env: Path, caplog) -> None:
        loader.get_config_path().write_text("- just\n- a list\n")

        settings = loader.load_config()

        assert settings.port == 8421
        assert "expected a mapping" in caplog.text

    def test_load_config_with_custom_path(self, mock_storage_env: Path) -> None:
        custom_path = mock_storage_env / "custom-config.yaml"
        custom_path.write_text("host: custom.example.com\nport: 7777\n")

        settings = loader.load_config(config_path=custom_path)

        assert settings.host == "custom.example.com"
        assert settings.port == 7777
        assert not loader.get_config_path().exists()


@pytest.mark.unit
class TestCopyrightSettings:
    """Test CopyrightSettings model."""

    def test_default_values(self, mock_storage_env: Path) -> None:
        settings = CopyrightSettings()

        assert settings.host == "127.0.0.1"
        assert settings.port == 8421
        assert settings.log_level == "info"
        assert settings.workers == 1
        assert settings.storage_dir is None

    def test_paths_expanded_and_resolved(self, mock_storage_env: Path) -> None:
        settings = CopyrightSettings(project_path="~/work/demo", storage_dir="relative/store")

        assert settings.project_path == str(Path("~/work/demo").expanduser().resolve())
        assert Path(settings.storage_dir).is_absolute()

    def test_effective_project_name_defaults_to_directory(self, mock_storage_env: Path, tmp_path: Path) -> None:
        settings = CopyrightSettings(project_path=str(tmp_path / "my-project"))

        assert settings.effective_project_name == "my-project"
