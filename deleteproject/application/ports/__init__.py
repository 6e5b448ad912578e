"""Application ports: interfaces the coordinator consumes."""

from deleteproject.application.ports.cache_delete_handler import (
    CacheDeleteHandlerProtocol,
)
from deleteproject.application.ports.database_delete_handler import (
    DatabaseDeleteHandlerProtocol,
)
from deleteproject.application.ports.delete_log import DeleteLogProtocol
from deleteproject.application.ports.delete_preconditions import (
    DeletePreconditionsProtocol,
)
from deleteproject.application.ports.filesystem_delete_handler import (
    FilesystemDeleteHandlerProtocol,
)
from deleteproject.application.ports.hide_project import HideProjectProtocol
from deleteproject.application.ports.remote_archive import (
    ArchiveAcceptance,
    RemoteArchivePort,
)
from deleteproject.application.ports.replicated_index import ReplicatedIndexProtocol
from deleteproject.application.ports.replication_status import (
    ReplicationStatusProtocol,
)
from deleteproject.application.ports.replication_transport import (
    ReplicationTransportPort,
)

__all__: list[str] = [
    "ArchiveAcceptance",
    "CacheDeleteHandlerProtocol",
    "DatabaseDeleteHandlerProtocol",
    "DeleteLogProtocol",
    "DeletePreconditionsProtocol",
    "FilesystemDeleteHandlerProtocol",
    "HideProjectProtocol",
    "RemoteArchivePort",
    "ReplicatedIndexProtocol",
    "ReplicationStatusProtocol",
    "ReplicationTransportPort",
]
