"""Delete preconditions port.

The precondition gate decides whether a user may delete a project and
whether the project is in a deletable state (protected projects, open
changes, child projects). It runs before any store is touched.
"""

from __future__ import annotations

from typing import Protocol

from deleteproject.domain.models.project import DeleteRequest, Project


class DeletePreconditionsProtocol(Protocol):
    """Protocol for the precondition gate."""

    async def assert_delete_permission(self, project: Project, user: str) -> None:
        """Check that the user may delete the project.

        Args:
            project: The project to delete.
            user: Acting identity.

        Raises:
            DeletePermissionDeniedError: If the user lacks permission.
        """
        ...

    async def assert_can_be_deleted(
        self, project: Project, request: DeleteRequest
    ) -> None:
        """Check that the project is in a deletable state.

        The request's force flag is consumed here.

        Args:
            project: The project to delete.
            request: The delete options.

        Raises:
            DeletePermissionDeniedError: If the project cannot be deleted.
        """
        ...

    async def can_delete(self, project: Project, user: str) -> bool:
        """Non-raising permission check used to decide visibility.

        Args:
            project: The project.
            user: Acting identity.

        Returns:
            True if the user may delete the project.
        """
        ...
