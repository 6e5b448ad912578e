"""Domain errors for deleteproject.

All exceptions inherit from DeleteProjectError.
"""

from deleteproject.domain.errors.deletion import (
    ConcurrentModificationError,
    ConfigurationUnreadableError,
    DeletePermissionDeniedError,
    ProjectNotFoundError,
    ReplicationTransportError,
    RepositoryNotFoundError,
    error_kind,
)
from deleteproject.domain.exceptions import DeleteProjectError

__all__: list[str] = [
    "ConcurrentModificationError",
    "ConfigurationUnreadableError",
    "DeletePermissionDeniedError",
    "DeleteProjectError",
    "ProjectNotFoundError",
    "ReplicationTransportError",
    "RepositoryNotFoundError",
    "error_kind",
]
