"""FastAPI application entry point for the project deletion service."""

from fastapi import FastAPI

from deleteproject import __version__
from deleteproject.api.routes.metrics import router as metrics_router
from deleteproject.api.routes.project_delete import router as project_delete_router
from deleteproject.bootstrap.logging import configure_logging

configure_logging()

app = FastAPI(
    title="Project Deletion API",
    description="Deletes projects across the database, repository and cache stores",
    version=__version__,
)

app.include_router(project_delete_router)
app.include_router(metrics_router)
