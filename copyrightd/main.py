"""Main FastAPI application for copyrightd.

This module creates and configures the FastAPI application that exposes
copyright_library via a REST API.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI

from copyright_library.storage.paths import get_daemon_log_path

from . import __version__
from .dependencies import get_copyright_project
from .dependencies import reset_copyright_project
from .routers import files_router
from .routers import mappings_router
from .routers import profiles_router
from .routers import status_router

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Configure logging
logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
logger = logging.getLogger(__name__)


def configure_file_logging(log_file: Path | None = None) -> logging.Handler:
    """Also write log records to the daemon log file.

    Args:
        log_file: Target file (default: daemon.log in the log directory)

    Returns:
        The handler added to the root logger
    """
    log_file = log_file or get_daemon_log_path()
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.getLogger().addHandler(handler)
    logger.info(f"Logging to {log_file}")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager.

    Loads the project on startup and saves it on shutdown.

    Args:
        app: FastAPI application instance
    """
    # Startup
    try:
        project = get_copyright_project()
        logger.info(f"Starting copyrightd for project {project.project_root}")
        logger.info(f"Profile storage: {project.storage_dir}")
    except Exception as e:
        # Don't fail startup; requests will retry building the project
        logger.error(f"Failed to load copyright project: {e}")

    yield

    # Shutdown
    try:
        get_copyright_project().save()
    except Exception as e:
        logger.error(f"Failed to save copyright project on shutdown: {e}")
    reset_copyright_project()
    logger.info("copyrightd stopped")


app = FastAPI(
    title="copyrightd",
    description="Copyright profile assignments for a project",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(status_router)
app.include_router(profiles_router)
app.include_router(mappings_router)
app.include_router(files_router)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with API information.

    Returns:
        API name, version and docs location
    """
    return {"name": "copyrightd", "version": __version__, "docs": "/docs"}
