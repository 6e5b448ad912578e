"""Hide project port.

The hide fallback replaces deletion when a preserve delete is requested on a
deployment that hides preserved projects.
"""

from __future__ import annotations

from typing import Protocol

from deleteproject.domain.models.project import Project


class HideProjectProtocol(Protocol):
    """Protocol for hiding a project from active project lists."""

    async def apply(self, project: Project) -> None:
        """Hide the project.

        Args:
            project: The project to hide.
        """
        ...
