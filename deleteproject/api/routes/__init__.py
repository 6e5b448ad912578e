"""API routers."""

from deleteproject.api.routes.metrics import router as metrics_router
from deleteproject.api.routes.project_delete import router as project_delete_router

__all__ = ["metrics_router", "project_delete_router"]
