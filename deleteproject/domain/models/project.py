"""Project deletion domain models.

A project is backed by database rows, a repository tree and cached views.
The coordinator only ever moves a project towards "deleted" or "hidden";
once deleted, referencing it again in this workflow is an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

# Suffix bare repositories usually carry on disk
GIT_SUFFIX: Final[str] = ".git"


class ReplicationMode(str, Enum):
    """How a project's repository is operated.

    Derived per request from host and repository configuration, never stored.
    """

    REPLICATED = "replicated"
    NON_REPLICATED = "non_replicated"

    @classmethod
    def from_flag(cls, replicated: bool) -> ReplicationMode:
        """Map a probe result to a mode."""
        return cls.REPLICATED if replicated else cls.NON_REPLICATED


class DeletionPath(str, Enum):
    """Which protocol a delete request ended up running."""

    NON_REPLICATED = "non_replicated"
    REPLICATED = "replicated"
    HIDDEN = "hidden"


@dataclass(frozen=True)
class Project:
    """A named project.

    Attributes:
        name: Project name, unique within the system.
    """

    name: str

    def __post_init__(self) -> None:
        """Validate the project name.

        Raises:
            ValueError: If the name is empty.
        """
        if not self.name or not self.name.strip():
            raise ValueError("project name must not be empty")

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class DeleteRequest:
    """Options for a single delete request.

    Attributes:
        preserve: Remove metadata only; history is kept and the
            repository is not destroyed.
        force: Consumed by the precondition gate, not by the coordinator.
    """

    preserve: bool = False
    force: bool = False


@dataclass(frozen=True)
class ChangeRecord:
    """A unit of review history owned by a project.

    Attributes:
        change_id: Numeric change identifier.
        project_name: Name of the owning project.
    """

    change_id: int
    project_name: str


@dataclass(frozen=True)
class DeletionOutcome:
    """Result of one coordinator invocation, as handed to the audit sink.

    Attributes:
        project_name: Name of the project the request targeted.
        user: Acting identity.
        request: The original request options.
        error: The first exception raised, or None on success.
    """

    project_name: str
    user: str
    request: DeleteRequest
    error: BaseException | None = None

    @property
    def succeeded(self) -> bool:
        """True when the request completed without error."""
        return self.error is None
