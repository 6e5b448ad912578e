"""Replication transport port - announce deletions to peer nodes.

Peers hold a full replica of every project. When a replicated project is
deleted here, peers must hear about the removed changes and the project
itself so they converge. Delivery is best effort; the correlation id lets
receivers deduplicate.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence


class ReplicationTransportPort(ABC):
    """Abstract interface for broadcasting deletion events to peers.

    Implementations must not touch local stores.
    """

    @abstractmethod
    async def replicate_change_deletion(
        self,
        project_name: str,
        preserve: bool,
        change_ids: Sequence[int],
        correlation_id: str,
    ) -> None:
        """Broadcast removal of a set of changes.

        Args:
            project_name: Project the changes belonged to.
            preserve: Whether the project deletion preserves data.
            change_ids: Identifiers of the removed changes.
            correlation_id: Per-operation token.
        """
        ...

    @abstractmethod
    async def replicate_project_deletion(
        self,
        project_name: str,
        preserve: bool,
        correlation_id: str,
    ) -> None:
        """Broadcast the deletion (or preservation) of a project.

        Args:
            project_name: Name of the deleted project.
            preserve: Whether the deletion preserved data.
            correlation_id: Per-operation token.
        """
        ...
