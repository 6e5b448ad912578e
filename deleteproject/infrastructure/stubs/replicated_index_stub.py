"""Replicated index stub."""

from __future__ import annotations

from collections.abc import Sequence

from deleteproject.application.ports.replicated_index import ReplicatedIndexProtocol


class ReplicatedIndexStub(ReplicatedIndexProtocol):
    """Records change ids removed from the index.

    Attributes:
        deleted_change_ids: One tuple per delete_changes() call.
    """

    def __init__(self, journal: list[str] | None = None) -> None:
        self._journal = journal
        self.deleted_change_ids: list[tuple[int, ...]] = []

    async def delete_changes(self, change_ids: Sequence[int]) -> None:
        """Record the removed change ids."""
        if self._journal is not None:
            self._journal.append("index.delete_changes")
        self.deleted_change_ids.append(tuple(change_ids))
