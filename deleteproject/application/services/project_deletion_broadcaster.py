"""Project deletion broadcaster.

Announces a deleted (or preserved) project to the replication layer.
"""

from __future__ import annotations

from deleteproject.application.ports.replication_transport import (
    ReplicationTransportPort,
)
from deleteproject.application.services.base import LoggingMixin


class ProjectDeletionBroadcaster(LoggingMixin):
    """Notifies peers that a project was deleted."""

    def __init__(self, transport: ReplicationTransportPort) -> None:
        """Initialize the broadcaster.

        Args:
            transport: Peer replication transport the deletion is sent on.
        """
        self._transport = transport
        self._init_logger()

    async def broadcast(
        self, project_name: str, preserve: bool, correlation_id: str
    ) -> None:
        """Broadcast the project deletion.

        Args:
            project_name: Name of the deleted project.
            preserve: Whether the deletion preserved data.
            correlation_id: Per-operation token, the same one the archive
                request carried.
        """
        await self._transport.replicate_project_deletion(
            project_name=project_name,
            preserve=preserve,
            correlation_id=correlation_id,
        )
        self._log_operation(
            "replicate_project_deletion", project=project_name, preserve=preserve
        ).info("project_deletion_broadcast")
