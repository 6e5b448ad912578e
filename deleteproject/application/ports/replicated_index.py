"""Replicated index port.

The local search index holds one document per change. Removed changes must
leave the index before peers are told, so a peer querying this node sees a
state consistent with the broadcast.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class ReplicatedIndexProtocol(Protocol):
    """Protocol for the local change index."""

    async def delete_changes(self, change_ids: Sequence[int]) -> None:
        """Remove changes from the local index.

        Args:
            change_ids: Identifiers of the changes to remove.
        """
        ...
