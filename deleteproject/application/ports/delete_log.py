"""Delete log (audit sink) port.

Every coordinator invocation hands exactly one outcome to this sink,
whether it succeeded or failed and wherever it failed.
"""

from __future__ import annotations

from typing import Protocol

from deleteproject.domain.models.project import DeletionOutcome


class DeleteLogProtocol(Protocol):
    """Protocol for recording delete audit entries."""

    async def on_delete(self, outcome: DeletionOutcome) -> None:
        """Record the outcome of one delete request.

        Args:
            outcome: Acting user, project, request options and error if any.
        """
        ...
