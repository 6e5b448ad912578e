"""Replication status probe backed by repository config files.

A repository is replicated when its own ``config`` file, read as Java
properties, carries ``replicated = true``. The repository is looked up under
the configured repository root, first as ``<name>.git`` and then as
``<name>``; the first location holding a ``replicated`` key decides.

The answer is recomputed on every call, so a repository that changes mode
is picked up by the next request.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from deleteproject.domain.models.project import GIT_SUFFIX, ReplicationMode
from deleteproject.infrastructure.adapters.replication.config_files import (
    load_properties,
)
from deleteproject.infrastructure.adapters.replication.daemon_config import (
    ReplicationSettings,
    ReplicationSettingsSource,
    settings_loader,
)

log = structlog.get_logger()

REPLICATED_PROPERTY = "replicated"
REPOSITORY_CONFIG_FILE = "config"


class RepositoryReplicationProbe:
    """Answers whether a project's repository is replicated.

    Satisfies ReplicationStatusProtocol.
    """

    def __init__(self, settings: ReplicationSettingsSource) -> None:
        """Initialize the probe.

        Args:
            settings: Resolved configuration chain, or a loader for it that
                is called on every probe.
        """
        self._load_settings = settings_loader(settings)

    def _candidate_config_paths(
        self, settings: ReplicationSettings, project_name: str
    ) -> list[Path]:
        repo_home = Path(settings.repo_home or "")
        return [
            repo_home / f"{project_name}{GIT_SUFFIX}" / REPOSITORY_CONFIG_FILE,
            repo_home / project_name / REPOSITORY_CONFIG_FILE,
        ]

    def is_replicated(self, project_name: str) -> bool:
        """Check whether the project's repository is replicated.

        Args:
            project_name: Name of the project.

        Returns:
            True only if the first repository config carrying the replicated
            key sets it to "true" (case-insensitive).

        Raises:
            ConfigurationUnreadableError: If a file in the chain exists but
                cannot be read or parsed.
        """
        settings = self._load_settings()
        if not settings.replication_configured:
            return False

        for config_path in self._candidate_config_paths(settings, project_name):
            properties = load_properties(config_path)
            if properties is None or REPLICATED_PROPERTY not in properties:
                continue
            replicated = properties[REPLICATED_PROPERTY].strip().lower() == "true"
            log.debug(
                "replication_status_probed",
                project=project_name,
                config_path=str(config_path),
                replicated=replicated,
            )
            return replicated

        return False

    def replication_mode(self, project_name: str) -> ReplicationMode:
        """Same as is_replicated, expressed as a ReplicationMode."""
        return ReplicationMode.from_flag(self.is_replicated(project_name))
