"""Application services for project deletion."""

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
from deleteproject.application.services.replication_probe import probe_replication

__all__ = [
    "ChangeSetReplicator",
    "DeleteActionService",
    "DeletionCoordinator",
    "ProjectDeletionBroadcaster",
    "probe_replication",
]
