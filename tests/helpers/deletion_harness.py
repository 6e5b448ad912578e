"""Deletion harness: every coordinator collaborator as an in-memory stub.

All stubs write to one shared journal, so tests can assert the order in
which the coordinator touched them.
"""

from __future__ import annotations

from prometheus_client import CollectorRegistry

from deleteproject.application.services.change_set_replicator import (
    ChangeSetReplicator,
)
from deleteproject.application.services.deletion_coordinator import (
    DeletionCoordinator,
)
from deleteproject.application.services.project_deletion_broadcaster import (
    ProjectDeletionBroadcaster,
)
from deleteproject.config.deletion_config import DeletionConfig
from deleteproject.infrastructure.monitoring.deletion_metrics import DeletionMetrics
from deleteproject.infrastructure.stubs import (
    CacheDeleteHandlerStub,
    DatabaseDeleteHandlerStub,
    DeleteLogStub,
    DeletePreconditionsStub,
    FilesystemDeleteHandlerStub,
    HideProjectStub,
    RemoteArchiveStub,
    ReplicatedIndexStub,
    ReplicationStatusStub,
    ReplicationTransportStub,
)


class DeletionHarness:
    """Stubbed collaborators plus a coordinator factory."""

    def __init__(self) -> None:
        self.journal: list[str] = []
        self.preconditions = DeletePreconditionsStub(journal=self.journal)
        self.replication_status = ReplicationStatusStub()
        self.database = DatabaseDeleteHandlerStub(journal=self.journal)
        self.filesystem = FilesystemDeleteHandlerStub(journal=self.journal)
        self.cache = CacheDeleteHandlerStub(journal=self.journal)
        self.hide = HideProjectStub(journal=self.journal)
        self.delete_log = DeleteLogStub(journal=self.journal)
        self.archive = RemoteArchiveStub(journal=self.journal)
        self.index = ReplicatedIndexStub(journal=self.journal)
        self.transport = ReplicationTransportStub(journal=self.journal)
        self.metrics = DeletionMetrics(registry=CollectorRegistry())

    def add_project(
        self,
        name: str,
        change_ids: list[int] | None = None,
        replicated: bool = False,
    ) -> None:
        """Create a project with a repository and optional changes."""
        self.filesystem.add_repository(name)
        if change_ids:
            self.database.add_changes(name, change_ids)
        self.replication_status.set_replicated(name, replicated)

    def coordinator(self, config: DeletionConfig | None = None) -> DeletionCoordinator:
        """Build a coordinator over the stubs."""
        return DeletionCoordinator(
            preconditions=self.preconditions,
            replication_status=self.replication_status,
            database=self.database,
            filesystem=self.filesystem,
            cache=self.cache,
            hide=self.hide,
            delete_log=self.delete_log,
            archive=self.archive,
            change_set_replicator=ChangeSetReplicator(self.index, self.transport),
            project_broadcaster=ProjectDeletionBroadcaster(self.transport),
            config=config or DeletionConfig(),
            metrics=self.metrics,
        )

    def store_calls(self) -> list[str]:
        """Journal entries without the precondition and audit bookkeeping."""
        return [
            entry
            for entry in self.journal
            if not entry.startswith(("preconditions.", "delete_log."))
        ]

    def deletion_count(self, path: str, outcome: str) -> float:
        """Current value of the deletions counter for a path and outcome."""
        value = self.metrics.get_registry().get_sample_value(
            "project_deletions_total",
            {
                "path": path,
                "outcome": outcome,
                "service": self.metrics._service_name,
                "environment": self.metrics._environment,
            },
        )
        return value or 0.0
