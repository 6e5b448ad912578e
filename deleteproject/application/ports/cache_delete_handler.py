"""Cache delete handler port."""

from __future__ import annotations

from typing import Protocol

from deleteproject.domain.models.project import Project


class CacheDeleteHandlerProtocol(Protocol):
    """Protocol for evicting a project from the in-memory caches."""

    async def delete(self, project: Project) -> None:
        """Evict the project and its derived views from every cache.

        Args:
            project: The project being deleted.
        """
        ...
