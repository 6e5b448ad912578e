"""Database delete handler stub.

In-memory stand-in for the change database. Holds change ids per project and
can be told to report a concurrent modification.
"""

from __future__ import annotations

from deleteproject.application.ports.database_delete_handler import (
    DatabaseDeleteHandlerProtocol,
)
from deleteproject.domain.errors import ConcurrentModificationError
from deleteproject.domain.models.project import ChangeRecord, Project


class DatabaseDeleteHandlerStub(DatabaseDeleteHandlerProtocol):
    """Stub implementation of DatabaseDeleteHandlerProtocol.

    Attributes:
        deleted_projects: Names passed to delete(), in call order.
        replicated_deletions: Names passed to replicated_delete_changes().
    """

    def __init__(
        self,
        changes: dict[str, list[int]] | None = None,
        journal: list[str] | None = None,
    ) -> None:
        """Initialize the stub.

        Args:
            changes: Change ids per project name.
            journal: Optional call journal shared with other stubs.
        """
        self._changes: dict[str, list[int]] = {
            name: list(ids) for name, ids in (changes or {}).items()
        }
        self._journal = journal
        self._conflict = False
        self.deleted_projects: list[str] = []
        self.replicated_deletions: list[str] = []

    def set_conflict(self, conflict: bool) -> None:
        """Test helper: make every call raise ConcurrentModificationError."""
        self._conflict = conflict

    def add_changes(self, project_name: str, change_ids: list[int]) -> None:
        """Test helper: add change rows for a project."""
        self._changes.setdefault(project_name, []).extend(change_ids)

    def change_ids(self, project_name: str) -> list[int]:
        """Test helper: remaining change ids for a project."""
        return list(self._changes.get(project_name, []))

    def _record(self, entry: str) -> None:
        if self._journal is not None:
            self._journal.append(entry)

    async def delete(self, project: Project) -> None:
        """Remove every change row of the project.

        Raises:
            ConcurrentModificationError: If conflict mode is on.
        """
        self._record(f"db.delete:{project.name}")
        if self._conflict:
            raise ConcurrentModificationError(project.name, operation="delete")
        self._changes.pop(project.name, None)
        self.deleted_projects.append(project.name)

    async def replicated_delete_changes(self, project: Project) -> list[ChangeRecord]:
        """Remove the project's change rows and return what was removed.

        Raises:
            ConcurrentModificationError: If conflict mode is on.
        """
        self._record(f"db.replicated_delete_changes:{project.name}")
        if self._conflict:
            raise ConcurrentModificationError(project.name)
        removed = self._changes.pop(project.name, [])
        self.replicated_deletions.append(project.name)
        return [ChangeRecord(change_id=i, project_name=project.name) for i in removed]
