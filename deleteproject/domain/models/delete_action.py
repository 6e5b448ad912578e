"""Delete action description model.

Describes how the delete affordance for a project should be offered to a
user: the label and title to show, and whether it is enabled and visible.
"""

from __future__ import annotations

from dataclasses import dataclass

DELETE_LABEL = "Delete..."
CLEAN_UP_LABEL = "Clean up..."


@dataclass(frozen=True)
class DeleteActionDescription:
    """How the delete affordance is presented for one project.

    Attributes:
        label: Short button label.
        title: Longer tooltip text.
        enabled: Whether the action can be triggered.
        visible: Whether the action is shown at all.
        replicated: Whether the project was treated as replicated.
    """

    label: str
    title: str
    enabled: bool
    visible: bool
    replicated: bool

    @classmethod
    def build(
        cls,
        *,
        project_name: str,
        all_projects_name: str,
        replicated: bool,
        can_delete: bool,
    ) -> DeleteActionDescription:
        """Build the description for a project.

        Args:
            project_name: Name of the project.
            all_projects_name: Name of the root project that can never be deleted.
            replicated: Whether the project is treated as replicated.
            can_delete: Whether the acting user passes the delete preconditions.

        Returns:
            The description to render.
        """
        is_all_projects = project_name == all_projects_name
        if is_all_projects:
            title = f"No deletion of {all_projects_name} project"
        elif replicated:
            title = f"Clean up replicated project {project_name}"
        else:
            title = f"Delete project {project_name}"

        return cls(
            label=CLEAN_UP_LABEL if replicated else DELETE_LABEL,
            title=title,
            enabled=not is_all_projects,
            visible=can_delete,
            replicated=replicated,
        )
