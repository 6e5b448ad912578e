"""Delete log writing audit entries through structlog.

One ``project_delete`` entry is written per delete request on a logger bound
to ``logger_name="delete_log"``, so a log pipeline can route audit entries
separately from operational logs.

Entry fields:
- user, project, preserve, force
- status: "ok" or "failed"
- error_kind, error_type, error (failed entries only)
"""

from __future__ import annotations

import structlog

from deleteproject.domain.errors import error_kind
from deleteproject.domain.models.project import DeletionOutcome

DELETE_LOG_NAME = "delete_log"
STATUS_OK = "ok"
STATUS_FAILED = "failed"


class StructlogDeleteLog:
    """DeleteLogProtocol implementation backed by structlog."""

    def __init__(self, logger: structlog.BoundLogger | None = None) -> None:
        """Initialize the delete log.

        Args:
            logger: Logger to write to (default: a structlog logger bound to
                the delete_log name).
        """
        self._log = logger or structlog.get_logger().bind(logger_name=DELETE_LOG_NAME)

    async def on_delete(self, outcome: DeletionOutcome) -> None:
        """Write the audit entry for one delete request.

        Args:
            outcome: Acting user, project, request options and error if any.
        """
        entry = self._log.bind(
            user=outcome.user,
            project=outcome.project_name,
            preserve=outcome.request.preserve,
            force=outcome.request.force,
        )
        if outcome.succeeded:
            entry.info("project_delete", status=STATUS_OK)
            return

        entry.error(
            "project_delete",
            status=STATUS_FAILED,
            error_kind=error_kind(outcome.error),
            error_type=type(outcome.error).__name__,
            error=str(outcome.error),
        )
