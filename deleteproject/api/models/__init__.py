"""API request/response models."""

from deleteproject.api.models.project_delete import (
    DeleteActionResponse,
    DeleteProjectRequest,
    ProjectDeleteErrorResponse,
)

__all__ = [
    "DeleteActionResponse",
    "DeleteProjectRequest",
    "ProjectDeleteErrorResponse",
]
