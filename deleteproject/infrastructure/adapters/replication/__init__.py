"""Replication daemon adapters.

Available adapters:
- DaemonConfigProvider: Resolves the replication configuration chain
- RepositoryReplicationProbe: Reads a repository's replicated flag
- DaemonArchiveRequester: Schedules delayed repository removal over HTTP
"""

from deleteproject.infrastructure.adapters.replication.archive_requester import (
    DaemonArchiveRequester,
)
from deleteproject.infrastructure.adapters.replication.daemon_config import (
    DaemonConfigProvider,
    ReplicationSettings,
    resolve_daemon_config_path,
)
from deleteproject.infrastructure.adapters.replication.replication_status_probe import (
    RepositoryReplicationProbe,
)

__all__ = [
    "DaemonArchiveRequester",
    "DaemonConfigProvider",
    "ReplicationSettings",
    "RepositoryReplicationProbe",
    "resolve_daemon_config_path",
]
