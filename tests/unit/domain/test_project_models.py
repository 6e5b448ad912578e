"""Unit tests for project deletion domain models."""

import pytest

from deleteproject.domain.models.delete_action import (
    CLEAN_UP_LABEL,
    DELETE_LABEL,
    DeleteActionDescription,
)
from deleteproject.domain.models.project import (
    DeleteRequest,
    DeletionOutcome,
    Project,
    ReplicationMode,
)


class TestProject:
    """Tests for Project."""

    def test_str_is_name(self) -> None:
        assert str(Project("team/foo")) == "team/foo"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_rejects_blank_name(self, name: str) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            Project(name)


class TestDeleteRequest:
    """Tests for DeleteRequest."""

    def test_defaults(self) -> None:
        request = DeleteRequest()
        assert request.preserve is False
        assert request.force is False


class TestReplicationMode:
    """Tests for ReplicationMode."""

    def test_from_flag(self) -> None:
        assert ReplicationMode.from_flag(True) is ReplicationMode.REPLICATED
        assert ReplicationMode.from_flag(False) is ReplicationMode.NON_REPLICATED


class TestDeletionOutcome:
    """Tests for DeletionOutcome."""

    def test_succeeded_without_error(self) -> None:
        outcome = DeletionOutcome("foo", "alice", DeleteRequest())
        assert outcome.succeeded

    def test_failed_with_error(self) -> None:
        outcome = DeletionOutcome("foo", "alice", DeleteRequest(), RuntimeError())
        assert not outcome.succeeded


class TestDeleteActionDescription:
    """Tests for DeleteActionDescription.build."""

    def test_replicated_wording(self) -> None:
        description = DeleteActionDescription.build(
            project_name="foo",
            all_projects_name="All-Projects",
            replicated=True,
            can_delete=True,
        )
        assert description.label == CLEAN_UP_LABEL
        assert description.title == "Clean up replicated project foo"

    def test_all_projects_keeps_label_but_disables(self) -> None:
        description = DeleteActionDescription.build(
            project_name="All-Projects",
            all_projects_name="All-Projects",
            replicated=False,
            can_delete=True,
        )
        assert description.label == DELETE_LABEL
        assert description.title == "No deletion of All-Projects project"
        assert description.enabled is False
        assert description.visible is True

    def test_visibility_follows_can_delete(self) -> None:
        description = DeleteActionDescription.build(
            project_name="foo",
            all_projects_name="All-Projects",
            replicated=False,
            can_delete=False,
        )
        assert description.visible is False
        assert description.enabled is True
