"""Replication status stub."""

from __future__ import annotations

from deleteproject.application.ports.replication_status import (
    ReplicationStatusProtocol,
)
from deleteproject.domain.errors import ConfigurationUnreadableError


class ReplicationStatusStub(ReplicationStatusProtocol):
    """Answers from a fixed set of replicated project names.

    Can be switched to fail every probe with ConfigurationUnreadableError.
    """

    def __init__(self, replicated_projects: set[str] | None = None) -> None:
        self._replicated: set[str] = set(replicated_projects or ())
        self._force_failure = False
        self.probed: list[str] = []

    def set_replicated(self, project_name: str, replicated: bool = True) -> None:
        """Test helper: set a project's replication flag."""
        if replicated:
            self._replicated.add(project_name)
        else:
            self._replicated.discard(project_name)

    def set_failure_mode(self, failure: bool) -> None:
        """Test helper: make probes raise ConfigurationUnreadableError."""
        self._force_failure = failure

    def is_replicated(self, project_name: str) -> bool:
        """Whether the project is in the replicated set."""
        self.probed.append(project_name)
        if self._force_failure:
            raise ConfigurationUnreadableError(
                f"{project_name}.git/config", "stub: forced probe failure"
            )
        return project_name in self._replicated
