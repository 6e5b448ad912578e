"""Database delete handler port.

Interface to the collaborator that owns a project's database rows (change
metadata, approvals, project record). Its internals are out of scope; the
coordinator only decides when it is called.
"""

from __future__ import annotations

from typing import Protocol

from deleteproject.domain.models.project import ChangeRecord, Project


class DatabaseDeleteHandlerProtocol(Protocol):
    """Protocol for removing a project's database records.

    Serialization of concurrent deletes is this collaborator's job: a lost
    race is reported as ConcurrentModificationError, never retried here.
    """

    async def delete(self, project: Project) -> None:
        """Delete every database record of a non-replicated project.

        Args:
            project: The project being deleted.

        Raises:
            ConcurrentModificationError: If another writer changed the rows.
        """
        ...

    async def replicated_delete_changes(self, project: Project) -> list[ChangeRecord]:
        """Delete change metadata of a replicated project.

        Args:
            project: The project being deleted.

        Returns:
            The change records that were removed, needed to replicate the
            removal to the local index and to peers.

        Raises:
            ConcurrentModificationError: If another writer changed the rows.
        """
        ...
