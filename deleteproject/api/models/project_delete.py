"""Project deletion API request/response models.

Pydantic models for the project deletion endpoints.
"""

from pydantic import BaseModel, Field

from deleteproject.domain.models.delete_action import DeleteActionDescription
from deleteproject.domain.models.project import DeleteRequest


class DeleteProjectRequest(BaseModel):
    """Options for deleting a project.

    Attributes:
        preserve: Keep history and the repository; remove the project only
            from active project lists.
        force: Delete even if the project has open changes.
    """

    preserve: bool = Field(
        default=False,
        description="Keep history and repository, remove only the project entry",
    )
    force: bool = Field(
        default=False,
        description="Delete even if the project still has open changes",
    )

    def to_domain(self) -> DeleteRequest:
        """Convert to the domain request."""
        return DeleteRequest(preserve=self.preserve, force=self.force)


class DeleteActionResponse(BaseModel):
    """How the delete action should be offered for a project."""

    label: str = Field(..., description="Short button label")
    title: str = Field(..., description="Tooltip text")
    enabled: bool = Field(..., description="Whether the action can be triggered")
    visible: bool = Field(..., description="Whether the action is shown")
    replicated: bool = Field(
        ..., description="Whether the project was treated as replicated"
    )

    @classmethod
    def from_domain(cls, description: DeleteActionDescription) -> "DeleteActionResponse":
        """Build the response from the domain description."""
        return cls(
            label=description.label,
            title=description.title,
            enabled=description.enabled,
            visible=description.visible,
            replicated=description.replicated,
        )


class ProjectDeleteErrorResponse(BaseModel):
    """RFC 7807 error response for project deletion endpoints."""

    type: str = Field(..., description="Error type URI")
    title: str = Field(..., description="Short error title")
    status: int = Field(..., description="HTTP status code")
    detail: str = Field(..., description="Detailed error message")
    instance: str = Field(..., description="Request URI that caused the error")
