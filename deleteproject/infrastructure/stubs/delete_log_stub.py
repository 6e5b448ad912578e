"""In-memory delete log for tests."""

from __future__ import annotations

from deleteproject.application.ports.delete_log import DeleteLogProtocol
from deleteproject.domain.models.project import DeletionOutcome


class DeleteLogStub(DeleteLogProtocol):
    """Keeps every audit outcome in memory.

    Attributes:
        entries: Outcomes received, in call order.
    """

    def __init__(self, journal: list[str] | None = None) -> None:
        self._journal = journal
        self.entries: list[DeletionOutcome] = []

    async def on_delete(self, outcome: DeletionOutcome) -> None:
        """Store the outcome."""
        if self._journal is not None:
            self._journal.append(f"delete_log.on_delete:{outcome.project_name}")
        self.entries.append(outcome)

    def clear(self) -> None:
        """Clear all stored entries."""
        self.entries.clear()
