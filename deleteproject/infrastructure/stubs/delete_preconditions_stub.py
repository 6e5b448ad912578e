"""Delete preconditions stub.

Permission is refused for configured users; projects can be marked as not
deletable, which a forced request overrides.
"""

from __future__ import annotations

from deleteproject.application.ports.delete_preconditions import (
    DeletePreconditionsProtocol,
)
from deleteproject.domain.errors import DeletePermissionDeniedError
from deleteproject.domain.models.project import DeleteRequest, Project


class DeletePreconditionsStub(DeletePreconditionsProtocol):
    """Stub implementation of DeletePreconditionsProtocol."""

    def __init__(
        self,
        denied_users: set[str] | None = None,
        undeletable_projects: set[str] | None = None,
        journal: list[str] | None = None,
    ) -> None:
        """Initialize the stub.

        Args:
            denied_users: Users refused delete permission on every project.
            undeletable_projects: Projects that fail the state check unless forced.
            journal: Optional call journal shared with other stubs.
        """
        self._denied_users: set[str] = set(denied_users or ())
        self._undeletable: set[str] = set(undeletable_projects or ())
        self._journal = journal

    def deny_user(self, user: str) -> None:
        """Test helper: refuse permission to a user."""
        self._denied_users.add(user)

    def mark_undeletable(self, project_name: str) -> None:
        """Test helper: make a project fail the state check."""
        self._undeletable.add(project_name)

    def _record(self, entry: str) -> None:
        if self._journal is not None:
            self._journal.append(entry)

    async def assert_delete_permission(self, project: Project, user: str) -> None:
        """Raise DeletePermissionDeniedError for denied users."""
        self._record(f"preconditions.permission:{project.name}")
        if user in self._denied_users:
            raise DeletePermissionDeniedError(
                project.name, user, "delete permission required"
            )

    async def assert_can_be_deleted(
        self, project: Project, request: DeleteRequest
    ) -> None:
        """Raise DeletePermissionDeniedError for undeletable, unforced projects."""
        self._record(f"preconditions.state:{project.name}")
        if project.name in self._undeletable and not request.force:
            raise DeletePermissionDeniedError(
                project.name, "", "project has open changes"
            )

    async def can_delete(self, project: Project, user: str) -> bool:
        """Whether the user is not denied."""
        return user not in self._denied_users
