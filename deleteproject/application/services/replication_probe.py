"""Replication probe with an explicit failure policy.

Callers disagree on what a failed probe means. The deletion coordinator
assumes the project is not replicated; the delete action description
assumes it is. Both go through here so the choice is visible at the call
site and the failure is always logged.
"""

from __future__ import annotations

import structlog

from deleteproject.application.ports.replication_status import (
    ReplicationStatusProtocol,
)
from deleteproject.domain.errors import ConfigurationUnreadableError


def probe_replication(
    probe: ReplicationStatusProtocol,
    project_name: str,
    *,
    assume_replicated_on_failure: bool,
    log: structlog.BoundLogger,
) -> bool:
    """Ask the probe, falling back to a fixed answer if it cannot read config.

    Args:
        probe: The replication status probe.
        project_name: Name of the project.
        assume_replicated_on_failure: Answer to use when the probe fails.
        log: Logger to report a probe failure on.

    Returns:
        The probe's answer, or the fallback.
    """
    try:
        return probe.is_replicated(project_name)
    except (ConfigurationUnreadableError, OSError) as e:
        log.error(
            "replication_probe_failed",
            project=project_name,
            error=str(e),
            assumed_replicated=assume_replicated_on_failure,
        )
        return assume_replicated_on_failure
