"""Replication transport stub recording broadcasts."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from deleteproject.application.ports.replication_transport import (
    ReplicationTransportPort,
)


@dataclass(frozen=True)
class ChangeDeletionBroadcast:
    """A recorded change deletion broadcast."""

    project_name: str
    preserve: bool
    change_ids: tuple[int, ...]
    correlation_id: str


@dataclass(frozen=True)
class ProjectDeletionBroadcast:
    """A recorded project deletion broadcast."""

    project_name: str
    preserve: bool
    correlation_id: str


class ReplicationTransportStub(ReplicationTransportPort):
    """Stub implementation of ReplicationTransportPort.

    Attributes:
        change_deletions: Change deletion broadcasts, in call order.
        project_deletions: Project deletion broadcasts, in call order.
    """

    def __init__(self, journal: list[str] | None = None) -> None:
        self._journal = journal
        self.change_deletions: list[ChangeDeletionBroadcast] = []
        self.project_deletions: list[ProjectDeletionBroadcast] = []

    async def replicate_change_deletion(
        self,
        project_name: str,
        preserve: bool,
        change_ids: Sequence[int],
        correlation_id: str,
    ) -> None:
        """Record a change deletion broadcast."""
        if self._journal is not None:
            self._journal.append(f"transport.change_deletion:{project_name}")
        self.change_deletions.append(
            ChangeDeletionBroadcast(
                project_name=project_name,
                preserve=preserve,
                change_ids=tuple(change_ids),
                correlation_id=correlation_id,
            )
        )

    async def replicate_project_deletion(
        self,
        project_name: str,
        preserve: bool,
        correlation_id: str,
    ) -> None:
        """Record a project deletion broadcast."""
        if self._journal is not None:
            self._journal.append(f"transport.project_deletion:{project_name}")
        self.project_deletions.append(
            ProjectDeletionBroadcast(
                project_name=project_name,
                preserve=preserve,
                correlation_id=correlation_id,
            )
        )
