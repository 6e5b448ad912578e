"""Domain models for project deletion."""

from deleteproject.domain.models.delete_action import DeleteActionDescription
from deleteproject.domain.models.project import (
    GIT_SUFFIX,
    ChangeRecord,
    DeleteRequest,
    DeletionOutcome,
    DeletionPath,
    Project,
    ReplicationMode,
)

__all__: list[str] = [
    "GIT_SUFFIX",
    "ChangeRecord",
    "DeleteActionDescription",
    "DeleteRequest",
    "DeletionOutcome",
    "DeletionPath",
    "Project",
    "ReplicationMode",
]
