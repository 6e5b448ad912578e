"""Filesystem delete handler port.

Interface to the collaborator that owns repository trees on disk and the
in-process repository cache.
"""

from __future__ import annotations

from typing import Protocol

from deleteproject.domain.models.project import Project


class FilesystemDeleteHandlerProtocol(Protocol):
    """Protocol for removing a project's repository."""

    async def delete(self, project: Project, preserve: bool) -> None:
        """Remove the project's repository from disk.

        Args:
            project: The project being deleted.
            preserve: Keep the repository data, only unregister it.

        Raises:
            RepositoryNotFoundError: If the repository does not exist.
        """
        ...

    async def delete_from_cache(self, project: Project) -> None:
        """Drop the repository from the in-process repository cache only.

        Used on replicated deployments where the replication daemon removes
        the directory itself, later.

        Args:
            project: The project being deleted.

        Raises:
            RepositoryNotFoundError: If the repository is not known.
        """
        ...
