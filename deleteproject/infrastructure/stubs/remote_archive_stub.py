"""Remote archive stub.

Accepts every request with 202 unless failure mode is on, in which case it
raises ReplicationTransportError like an unreachable daemon.
"""

from __future__ import annotations

from deleteproject.application.ports.remote_archive import (
    ArchiveAcceptance,
    RemoteArchivePort,
)
from deleteproject.domain.errors import ReplicationTransportError


class RemoteArchiveStub(RemoteArchivePort):
    """Stub implementation of RemoteArchivePort.

    Attributes:
        requests: (project name, correlation id) pairs received.
    """

    def __init__(
        self,
        repo_home: str = "/data/repos",
        *,
        force_failure: bool = False,
        journal: list[str] | None = None,
    ) -> None:
        """Initialize the stub.

        Args:
            repo_home: Repository root used to build reported paths.
            force_failure: If True, every request fails.
            journal: Optional call journal shared with other stubs.
        """
        self._repo_home = repo_home
        self._force_failure = force_failure
        self._journal = journal
        self.requests: list[tuple[str, str]] = []

    def set_failure_mode(self, failure: bool) -> None:
        """Test helper: make requests fail."""
        self._force_failure = failure

    async def schedule_removal(
        self, project_name: str, correlation_id: str
    ) -> ArchiveAcceptance:
        """Record the request and accept it."""
        if self._journal is not None:
            self._journal.append(f"archive.schedule_removal:{project_name}")
        repo_path = f"{self._repo_home}/{project_name}.git"
        self.requests.append((project_name, correlation_id))
        if self._force_failure:
            raise ReplicationTransportError(
                repo_path, "stub: forced failure", status_code=500
            )
        return ArchiveAcceptance(
            project_name=project_name,
            repo_path=repo_path,
            correlation_id=correlation_id,
            status_code=202,
        )
