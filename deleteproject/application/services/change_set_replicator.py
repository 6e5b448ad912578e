"""Change-set replicator.

Removes deleted changes from the local index, then tells peers about the
same change ids. The local index goes first so a peer that reacts to the
broadcast by querying this node does not find the changes still indexed.
"""

from __future__ import annotations

from collections.abc import Sequence

from deleteproject.application.ports.replicated_index import ReplicatedIndexProtocol
from deleteproject.application.ports.replication_transport import (
    ReplicationTransportPort,
)
from deleteproject.application.services.base import LoggingMixin
from deleteproject.domain.models.project import ChangeRecord


class ChangeSetReplicator(LoggingMixin):
    """Propagates removal of a set of changes."""

    def __init__(
        self,
        index: ReplicatedIndexProtocol,
        transport: ReplicationTransportPort,
    ) -> None:
        """Initialize the replicator.

        Args:
            index: Local change index.
            transport: Replication transport to peers.
        """
        self._index = index
        self._transport = transport
        self._init_logger()

    async def replicate(
        self,
        project_name: str,
        preserve: bool,
        changes: Sequence[ChangeRecord],
        correlation_id: str,
    ) -> None:
        """Remove changes from the index and broadcast their removal.

        Nothing happens for an empty change set. Failures propagate; the
        index removal is not undone if the broadcast fails.

        Args:
            project_name: Project the changes belonged to.
            preserve: Preserve flag of the project deletion.
            changes: Removed change records.
            correlation_id: Per-operation token.
        """
        change_ids = [change.change_id for change in changes]
        log = self._log_operation(
            "replicate_change_deletion",
            project=project_name,
            change_count=len(change_ids),
        )
        if not change_ids:
            log.debug("change_set_empty")
            return

        await self._index.delete_changes(change_ids)
        await self._transport.replicate_change_deletion(
            project_name=project_name,
            preserve=preserve,
            change_ids=change_ids,
            correlation_id=correlation_id,
        )
        log.info("change_deletion_replicated")
