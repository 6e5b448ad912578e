"""Remote archive port - schedule asynchronous repository removal.

On replicated deployments the physical repository is removed by the local
replication daemon, not by this process. This port asks the daemon to
archive the repository and schedule its removal; the only contract is
"accepted for processing". Nothing here waits for, or can query, the
removal itself.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ArchiveAcceptance:
    """Receipt for an accepted archive-and-remove request.

    Attributes:
        project_name: Project whose repository will be removed.
        repo_path: Repository path the daemon was given.
        correlation_id: Token the daemon uses to track the delayed removal.
        status_code: Acceptance status returned by the daemon.
    """

    project_name: str
    repo_path: str
    correlation_id: str
    status_code: int


class RemoteArchivePort(ABC):
    """Abstract interface for scheduling delayed repository removal.

    Usage:
        acceptance = await archiver.schedule_removal("foo", correlation_id)
        log.info("archive_accepted", repo_path=acceptance.repo_path)
    """

    @abstractmethod
    async def schedule_removal(
        self, project_name: str, correlation_id: str
    ) -> ArchiveAcceptance:
        """Ask the replication daemon to archive and later remove a repository.

        Args:
            project_name: Name of the project.
            correlation_id: Per-operation token tagging the delayed removal.

        Returns:
            ArchiveAcceptance when the daemon accepted the request.

        Raises:
            ReplicationTransportError: If the daemon could not be reached or
                answered with a status other than an acceptance.
        """
        ...
