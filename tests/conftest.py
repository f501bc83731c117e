"""
Shared pytest fixtures for the copyright test suite.

Provides fixtures for:
- Temporary storage directories
- A project tree with source and test folders
- Registries with isolated storage and in-memory scopes
- Sample profiles
"""

import tempfile
from collections.abc import Callable
from collections.abc import Generator
from pathlib import Path

import pytest

from copyright_library.models.profiles import CopyrightProfile
from copyright_library.registry import CopyrightManager

ScopePredicate = Callable[[Path], bool]


@pytest.fixture
def temp_storage_dir() -> Generator[Path, None, None]:
    """Create temporary storage directory for tests.

    Automatically cleaned up after test completes.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def mock_storage_env(temp_storage_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point COPYRIGHTD_HOME at a temp directory.

    Also clears overrides that would leak settings in from the environment.

    Returns:
        Path to temporary storage directory
    """
    monkeypatch.setenv("COPYRIGHTD_HOME", str(temp_storage_dir))
    for name in (
        "COPYRIGHTD_CONFIG_DIR",
        "COPYRIGHTD_SHARE_DIR",
        "COPYRIGHTD_LOG_DIR",
        "COPYRIGHTD_PROJECT_PATH",
        "COPYRIGHTD_STORAGE_DIR",
        "COPYRIGHTD_HOST",
        "COPYRIGHTD_PORT",
    ):
        monkeypatch.delenv(name, raising=False)
    return temp_storage_dir


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Create a project tree with src/ and tests/ folders."""
    project = tmp_path.resolve() / "project"
    (project / "src").mkdir(parents=True)
    (project / "tests").mkdir()
    return project


@pytest.fixture
def scopes(project_dir: Path) -> dict[str, ScopePredicate]:
    """In-memory scope predicates keyed by scope name."""
    return {
        "src": lambda file: (project_dir / "src") in Path(file).parents,
        "test": lambda file: (project_dir / "tests") in Path(file).parents,
    }


@pytest.fixture
def manager(tmp_path: Path, scopes: dict[str, ScopePredicate]) -> CopyrightManager:
    """CopyrightManager with isolated storage and in-memory scopes."""
    return CopyrightManager(tmp_path / "copyright", scopes.get)


@pytest.fixture
def apache() -> CopyrightProfile:
    return CopyrightProfile(name="Apache", notice="Copyright $today.year Apache contributors")


@pytest.fixture
def mit() -> CopyrightProfile:
    return CopyrightProfile(name="MIT", notice="Copyright (c) $today.year MIT holders")
