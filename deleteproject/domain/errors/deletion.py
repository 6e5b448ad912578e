"""Project deletion errors.

Each class maps to one failure kind a delete request can end with. Anything
that is not one of these is an unexpected failure and is passed through
untouched.

Error kinds:
- NotFound: ProjectNotFoundError, RepositoryNotFoundError
- Conflict: ConcurrentModificationError
- PermissionDenied: DeletePermissionDeniedError
- ReplicationTransportFailure: ReplicationTransportError
- ConfigurationUnreadable: ConfigurationUnreadableError
"""

from __future__ import annotations

from deleteproject.domain.exceptions import DeleteProjectError


class ProjectNotFoundError(DeleteProjectError):
    """Raised when the project to delete no longer exists.

    Usually a benign race with an earlier deletion of the same project.
    Steps that already ran before this error are not reverted.

    Attributes:
        project_name: Name of the project that could not be found.
    """

    def __init__(self, project_name: str, message: str | None = None) -> None:
        """Initialize not found error.

        Args:
            project_name: Name of the missing project.
            message: Optional override for the default message.
        """
        self.project_name = project_name
        super().__init__(message or f"Project {project_name} not found")


class RepositoryNotFoundError(ProjectNotFoundError):
    """Raised by the filesystem collaborator when the repository is absent.

    Attributes:
        project_name: Name of the project whose repository is missing.
    """

    def __init__(self, project_name: str) -> None:
        """Initialize repository not found error.

        Args:
            project_name: Name of the project whose repository is missing.
        """
        super().__init__(
            project_name, f"Repository for project {project_name} not found"
        )


class ConcurrentModificationError(DeleteProjectError):
    """Raised when another writer changed the project's rows concurrently.

    The database collaborator detects the conflict; the coordinator never
    retries. Callers may re-issue the delete request.

    Attributes:
        project_name: Name of the project being deleted.
        operation: The database operation that lost the race.
    """

    def __init__(self, project_name: str, operation: str = "delete_changes") -> None:
        """Initialize concurrent modification error.

        Args:
            project_name: Name of the project being deleted.
            operation: Description of the failed operation.
        """
        self.project_name = project_name
        self.operation = operation
        super().__init__(
            f"Concurrent modification detected for project {project_name} "
            f"during {operation}"
        )


class DeletePermissionDeniedError(DeleteProjectError):
    """Raised by the precondition gate when a delete is not allowed.

    Attributes:
        project_name: Name of the project.
        user: Acting identity that was refused.
        reason: Why the delete was refused.
    """

    def __init__(self, project_name: str, user: str, reason: str) -> None:
        """Initialize permission denied error.

        Args:
            project_name: Name of the project.
            user: Acting identity that was refused.
            reason: Why the delete was refused.
        """
        self.project_name = project_name
        self.user = user
        self.reason = reason
        super().__init__(f"Cannot delete project {project_name}: {reason}")


class ReplicationTransportError(DeleteProjectError):
    """Raised when the replication daemon did not accept an archive request.

    Covers both transport failures (no response) and responses with a
    status the daemon does not use for acceptance.

    Attributes:
        repo_path: Repository path the request was made for.
        status_code: HTTP status returned by the daemon, None on transport failure.
        response_body: Body returned by the daemon, for diagnostics.
    """

    def __init__(
        self,
        repo_path: str,
        message: str,
        status_code: int | None = None,
        response_body: str = "",
    ) -> None:
        """Initialize replication transport error.

        Args:
            repo_path: Repository path the request was made for.
            message: Human-readable description of the failure.
            status_code: HTTP status returned by the daemon, if any.
            response_body: Body returned by the daemon, if any.
        """
        self.repo_path = repo_path
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(f"Error with deleting repo {repo_path}: {message}")


class ConfigurationUnreadableError(DeleteProjectError):
    """Raised when a configuration file exists but cannot be read or parsed.

    Absent files are not an error anywhere in the configuration chain.

    Attributes:
        path: Path of the unreadable file.
    """

    def __init__(self, path: str, reason: str) -> None:
        """Initialize configuration unreadable error.

        Args:
            path: Path of the unreadable file.
            reason: What went wrong while reading it.
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read {path}: {reason}")


def error_kind(error: BaseException | None) -> str:
    """Classify an exception into the failure kind it reports.

    Args:
        error: Exception raised by a delete request, or None on success.

    Returns:
        One of "success", "not_found", "conflict", "permission_denied",
        "replication_transport", "configuration_unreadable" or "unexpected".
    """
    if error is None:
        return "success"
    if isinstance(error, ProjectNotFoundError):
        return "not_found"
    if isinstance(error, ConcurrentModificationError):
        return "conflict"
    if isinstance(error, DeletePermissionDeniedError):
        return "permission_denied"
    if isinstance(error, ReplicationTransportError):
        return "replication_transport"
    if isinstance(error, ConfigurationUnreadableError):
        return "configuration_unreadable"
    return "unexpected"
