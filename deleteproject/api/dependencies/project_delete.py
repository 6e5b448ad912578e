"""Project deletion API dependencies.

Dependency injection setup for the deletion coordinator and the delete
action service.

The replication probe and the archive requester are real. They are handed
the bootstrap loader rather than loaded settings, so an unreadable
configuration chain fails inside a probe or a delete request, where the
probe fallbacks and the audit record apply. The database, filesystem, cache,
hide, precondition, index and peer transport collaborators are owned by the
host system; here they are in-memory stubs.
"""

from __future__ import annotations

from deleteproject.application.ports.delete_log import DeleteLogProtocol
from deleteproject.application.ports.delete_preconditions import (
    DeletePreconditionsProtocol,
)
from deleteproject.application.ports.replication_status import (
    ReplicationStatusProtocol,
)
from deleteproject.application.ports.replication_transport import (
    ReplicationTransportPort,
)
from deleteproject.application.services.change_set_replicator import (
    ChangeSetReplicator,
)
from deleteproject.application.services.delete_action_service import (
    DeleteActionService,
)
from deleteproject.application.services.deletion_coordinator import (
    DeletionCoordinator,
)
from deleteproject.application.services.project_deletion_broadcaster import (
    ProjectDeletionBroadcaster,
)
from deleteproject.bootstrap.replication import (
    get_replication_daemon_config,
    get_replication_settings,
)
from deleteproject.config.deletion_config import DeletionConfig
from deleteproject.infrastructure.adapters.audit.delete_log import StructlogDeleteLog
from deleteproject.infrastructure.adapters.replication.archive_requester import (
    DaemonArchiveRequester,
)
from deleteproject.infrastructure.adapters.replication.replication_status_probe import (
    RepositoryReplicationProbe,
)
from deleteproject.infrastructure.monitoring.deletion_metrics import (
    get_deletion_metrics,
)
from deleteproject.infrastructure.stubs import (
    CacheDeleteHandlerStub,
    DatabaseDeleteHandlerStub,
    DeletePreconditionsStub,
    FilesystemDeleteHandlerStub,
    HideProjectStub,
    ReplicatedIndexStub,
    ReplicationTransportStub,
)

# Singleton instances
_deletion_config: DeletionConfig | None = None
_replication_status: ReplicationStatusProtocol | None = None
_preconditions: DeletePreconditionsProtocol | None = None
_delete_log: DeleteLogProtocol | None = None
_replication_transport: ReplicationTransportPort | None = None
_deletion_coordinator: DeletionCoordinator | None = None
_delete_action_service: DeleteActionService | None = None


def get_deletion_config() -> DeletionConfig:
    """Get deletion configuration."""
    global _deletion_config
    if _deletion_config is None:
        _deletion_config = DeletionConfig.from_environment()
    return _deletion_config


def get_replication_status() -> ReplicationStatusProtocol:
    """Get the replication status probe."""
    global _replication_status
    if _replication_status is None:
        _replication_status = RepositoryReplicationProbe(get_replication_settings)
    return _replication_status


def get_delete_preconditions() -> DeletePreconditionsProtocol:
    """Get the precondition gate.

    Returns singleton DeletePreconditionsStub for development.
    """
    global _preconditions
    if _preconditions is None:
        _preconditions = DeletePreconditionsStub()
    return _preconditions


def get_delete_log() -> DeleteLogProtocol:
    """Get the audit sink."""
    global _delete_log
    if _delete_log is None:
        _delete_log = StructlogDeleteLog()
    return _delete_log


def get_replication_transport() -> ReplicationTransportPort:
    """Get the peer replication transport.

    Returns singleton ReplicationTransportStub for development.
    """
    global _replication_transport
    if _replication_transport is None:
        _replication_transport = ReplicationTransportStub()
    return _replication_transport


def get_deletion_coordinator() -> DeletionCoordinator:
    """Get the deletion coordinator with all collaborators wired.

    Returns:
        The singleton DeletionCoordinator.
    """
    global _deletion_coordinator
    if _deletion_coordinator is None:
        transport = get_replication_transport()
        _deletion_coordinator = DeletionCoordinator(
            preconditions=get_delete_preconditions(),
            replication_status=get_replication_status(),
            database=DatabaseDeleteHandlerStub(),
            filesystem=FilesystemDeleteHandlerStub(),
            cache=CacheDeleteHandlerStub(),
            hide=HideProjectStub(),
            delete_log=get_delete_log(),
            archive=DaemonArchiveRequester(
                get_replication_settings, get_replication_daemon_config()
            ),
            change_set_replicator=ChangeSetReplicator(
                ReplicatedIndexStub(), transport
            ),
            project_broadcaster=ProjectDeletionBroadcaster(transport),
            config=get_deletion_config(),
            metrics=get_deletion_metrics(),
        )
    return _deletion_coordinator


def get_delete_action_service() -> DeleteActionService:
    """Get the delete action description service."""
    global _delete_action_service
    if _delete_action_service is None:
        _delete_action_service = DeleteActionService(
            preconditions=get_delete_preconditions(),
            replication_status=get_replication_status(),
            config=get_deletion_config(),
        )
    return _delete_action_service


def reset_project_delete_dependencies() -> None:
    """Reset all singletons (for testing only)."""
    global _deletion_config, _replication_status, _preconditions, _delete_log
    global _replication_transport, _deletion_coordinator, _delete_action_service
    _deletion_config = None
    _replication_status = None
    _preconditions = None
    _delete_log = None
    _replication_transport = None
    _deletion_coordinator = None
    _delete_action_service = None
