"""In-memory stubs for every deletion port.

Used by tests and by the API's development wiring. Each stub accepts an
optional shared journal list so the order of calls across collaborators
can be asserted.

WARNING: These stubs are for development/testing only.
"""

from deleteproject.infrastructure.stubs.cache_delete_handler_stub import (
    CacheDeleteHandlerStub,
)
from deleteproject.infrastructure.stubs.database_delete_handler_stub import (
    DatabaseDeleteHandlerStub,
)
from deleteproject.infrastructure.stubs.delete_log_stub import DeleteLogStub
from deleteproject.infrastructure.stubs.delete_preconditions_stub import (
    DeletePreconditionsStub,
)
from deleteproject.infrastructure.stubs.filesystem_delete_handler_stub import (
    FilesystemDeleteHandlerStub,
)
from deleteproject.infrastructure.stubs.hide_project_stub import HideProjectStub
from deleteproject.infrastructure.stubs.remote_archive_stub import RemoteArchiveStub
from deleteproject.infrastructure.stubs.replicated_index_stub import (
    ReplicatedIndexStub,
)
from deleteproject.infrastructure.stubs.replication_status_stub import (
    ReplicationStatusStub,
)
from deleteproject.infrastructure.stubs.replication_transport_stub import (
    ChangeDeletionBroadcast,
    ProjectDeletionBroadcast,
    ReplicationTransportStub,
)

__all__ = [
    "CacheDeleteHandlerStub",
    "ChangeDeletionBroadcast",
    "DatabaseDeleteHandlerStub",
    "DeleteLogStub",
    "DeletePreconditionsStub",
    "FilesystemDeleteHandlerStub",
    "HideProjectStub",
    "ProjectDeletionBroadcast",
    "RemoteArchiveStub",
    "ReplicatedIndexStub",
    "ReplicationStatusStub",
    "ReplicationTransportStub",
]
