"""
Fixtures for API tests.

Each test gets its own project and profile storage, injected into the app
through a dependency override.
"""

from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from copyright_library.config.settings import CopyrightSettings
from copyright_library.services.project_service import CopyrightProject
from copyrightd.dependencies import get_copyright_project
from copyrightd.main import app


@pytest.fixture
def project(mock_storage_env: Path, project_dir: Path, tmp_path: Path) -> CopyrightProject:
    """Copyright project rooted at project_dir with temp storage."""
    settings = CopyrightSettings(
        project_path=str(project_dir),
        project_name="demo",
        storage_dir=str(tmp_path / "store"),
    )
    return CopyrightProject(settings)


@pytest.fixture
def client(project: CopyrightProject) -> Generator[TestClient, None, None]:
    """Create FastAPI test client bound to the test project."""
    app.dependency_overrides[get_copyright_project] = lambda: project
    yield TestClient(app)
    app.dependency_overrides.clear()
