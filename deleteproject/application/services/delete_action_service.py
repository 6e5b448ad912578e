"""Delete action description service.

Decides how the delete affordance is offered for a project: "Delete..." for
ordinary projects, "Clean up..." for replicated ones, disabled for the root
project and hidden from users who may not delete.

A probe failure here is treated as replicated, unlike in the coordinator,
so the affordance errs towards the cautious "Clean up..." wording.
"""

from __future__ import annotations

from deleteproject.application.ports.delete_preconditions import (
    DeletePreconditionsProtocol,
)
from deleteproject.application.ports.replication_status import (
    ReplicationStatusProtocol,
)
from deleteproject.application.services.base import LoggingMixin
from deleteproject.application.services.replication_probe import probe_replication
from deleteproject.config.deletion_config import (
    DEFAULT_DELETION_CONFIG,
    DeletionConfig,
)
from deleteproject.domain.models.delete_action import DeleteActionDescription
from deleteproject.domain.models.project import Project


class DeleteActionService(LoggingMixin):
    """Builds DeleteActionDescription values."""

    def __init__(
        self,
        preconditions: DeletePreconditionsProtocol,
        replication_status: ReplicationStatusProtocol,
        config: DeletionConfig = DEFAULT_DELETION_CONFIG,
    ) -> None:
        """Initialize the service.

        Args:
            preconditions: Precondition gate, for the visibility check.
            replication_status: Replication status probe.
            config: Deployment switches (root project name).
        """
        self._preconditions = preconditions
        self._replication_status = replication_status
        self._config = config
        self._init_logger(component="presentation")

    async def describe(self, project: Project, user: str) -> DeleteActionDescription:
        """Describe the delete action for a project and user.

        Args:
            project: The project.
            user: Acting identity.

        Returns:
            Label, title, enabled and visible flags for the action.
        """
        log = self._log_operation("describe_delete_action", project=project.name)
        replicated = probe_replication(
            self._replication_status,
            project.name,
            assume_replicated_on_failure=True,
            log=log,
        )
        can_delete = await self._preconditions.can_delete(project, user)
        description = DeleteActionDescription.build(
            project_name=project.name,
            all_projects_name=self._config.all_projects_name,
            replicated=replicated,
            can_delete=can_delete,
        )
        log.debug(
            "delete_action_described",
            label=description.label,
            enabled=description.enabled,
            visible=description.visible,
        )
        return description
