"""Filesystem delete handler stub.

Tracks which repositories exist; deleting a missing one raises
RepositoryNotFoundError, as the real handler does.
"""

from __future__ import annotations

from deleteproject.application.ports.filesystem_delete_handler import (
    FilesystemDeleteHandlerProtocol,
)
from deleteproject.domain.errors import RepositoryNotFoundError
from deleteproject.domain.models.project import Project


class FilesystemDeleteHandlerStub(FilesystemDeleteHandlerProtocol):
    """Stub implementation of FilesystemDeleteHandlerProtocol.

    Attributes:
        deletions: (project name, preserve) pairs passed to delete().
        cache_evictions: Names passed to delete_from_cache().
    """

    def __init__(
        self,
        repositories: set[str] | None = None,
        journal: list[str] | None = None,
    ) -> None:
        """Initialize the stub.

        Args:
            repositories: Names of projects whose repository exists.
            journal: Optional call journal shared with other stubs.
        """
        self._repositories: set[str] = set(repositories or ())
        self._journal = journal
        self.deletions: list[tuple[str, bool]] = []
        self.cache_evictions: list[str] = []

    def add_repository(self, project_name: str) -> None:
        """Test helper: create a repository."""
        self._repositories.add(project_name)

    def has_repository(self, project_name: str) -> bool:
        """Test helper: whether the repository is still on disk."""
        return project_name in self._repositories

    def _record(self, entry: str) -> None:
        if self._journal is not None:
            self._journal.append(entry)

    async def delete(self, project: Project, preserve: bool) -> None:
        """Delete the repository; preserve keeps it on disk.

        Raises:
            RepositoryNotFoundError: If the repository does not exist.
        """
        self._record(f"fs.delete:{project.name}")
        if project.name not in self._repositories:
            raise RepositoryNotFoundError(project.name)
        if not preserve:
            self._repositories.discard(project.name)
        self.deletions.append((project.name, preserve))

    async def delete_from_cache(self, project: Project) -> None:
        """Drop the in-process repository handle; the disk is not touched.

        Raises:
            RepositoryNotFoundError: If the repository does not exist.
        """
        self._record(f"fs.delete_from_cache:{project.name}")
        if project.name not in self._repositories:
            raise RepositoryNotFoundError(project.name)
        self.cache_evictions.append(project.name)
