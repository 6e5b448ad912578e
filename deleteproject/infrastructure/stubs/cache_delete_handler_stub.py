"""Cache delete handler stub."""

from __future__ import annotations

from deleteproject.application.ports.cache_delete_handler import (
    CacheDeleteHandlerProtocol,
)
from deleteproject.domain.models.project import Project


class CacheDeleteHandlerStub(CacheDeleteHandlerProtocol):
    """Records evicted projects.

    Attributes:
        evicted: Names passed to delete(), in call order.
    """

    def __init__(self, journal: list[str] | None = None) -> None:
        self._journal = journal
        self.evicted: list[str] = []

    async def delete(self, project: Project) -> None:
        """Evict the project from every cache."""
        if self._journal is not None:
            self._journal.append(f"cache.delete:{project.name}")
        self.evicted.append(project.name)
