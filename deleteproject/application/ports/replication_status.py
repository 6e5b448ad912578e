"""Replication status port.

Answers whether a project is operated in replicated (multi-node) mode. Pure
read with no side effects; the answer is recomputed on every request.
"""

from __future__ import annotations

from typing import Protocol


class ReplicationStatusProtocol(Protocol):
    """Protocol for the replication status probe."""

    def is_replicated(self, project_name: str) -> bool:
        """Check whether the project's repository is replicated.

        Absent configuration at any level means not replicated.

        Args:
            project_name: Name of the project.

        Returns:
            True if the repository's own configuration says it is replicated.

        Raises:
            ConfigurationUnreadableError: If an existing configuration file
                cannot be read or parsed.
        """
        ...
