"""Hide project stub."""

from __future__ import annotations

from deleteproject.application.ports.hide_project import HideProjectProtocol
from deleteproject.domain.models.project import Project


class HideProjectStub(HideProjectProtocol):
    """Records hidden projects.

    Attributes:
        hidden: Names passed to apply(), in call order.
    """

    def __init__(self, journal: list[str] | None = None) -> None:
        self._journal = journal
        self.hidden: list[str] = []

    async def apply(self, project: Project) -> None:
        """Mark the project hidden."""
        if self._journal is not None:
            self._journal.append(f"hide.apply:{project.name}")
        self.hidden.append(project.name)
