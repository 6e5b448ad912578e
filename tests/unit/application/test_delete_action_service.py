"""Unit tests for DeleteActionService."""

from __future__ import annotations

import pytest

from deleteproject.application.services.delete_action_service import (
    DeleteActionService,
)
from deleteproject.config.deletion_config import DeletionConfig
from deleteproject.domain.models.delete_action import CLEAN_UP_LABEL, DELETE_LABEL
from deleteproject.domain.models.project import Project
from deleteproject.infrastructure.stubs import (
    DeletePreconditionsStub,
    ReplicationStatusStub,
)


@pytest.fixture
def preconditions() -> DeletePreconditionsStub:
    return DeletePreconditionsStub()


@pytest.fixture
def replication_status() -> ReplicationStatusStub:
    return ReplicationStatusStub()


@pytest.fixture
def service(
    preconditions: DeletePreconditionsStub,
    replication_status: ReplicationStatusStub,
) -> DeleteActionService:
    return DeleteActionService(preconditions, replication_status)


class TestDescribe:
    """Tests for describe()."""

    @pytest.mark.asyncio
    async def test_ordinary_project(self, service: DeleteActionService) -> None:
        description = await service.describe(Project("foo"), "alice")

        assert description.label == DELETE_LABEL
        assert description.title == "Delete project foo"
        assert description.enabled is True
        assert description.visible is True
        assert description.replicated is False

    @pytest.mark.asyncio
    async def test_replicated_project(
        self,
        service: DeleteActionService,
        replication_status: ReplicationStatusStub,
    ) -> None:
        replication_status.set_replicated("foo")

        description = await service.describe(Project("foo"), "alice")

        assert description.label == CLEAN_UP_LABEL
        assert description.title == "Clean up replicated project foo"

    @pytest.mark.asyncio
    async def test_all_projects_is_disabled(self, service: DeleteActionService) -> None:
        description = await service.describe(Project("All-Projects"), "alice")

        assert description.enabled is False
        assert description.title == "No deletion of All-Projects project"

    @pytest.mark.asyncio
    async def test_custom_root_project_name(
        self,
        preconditions: DeletePreconditionsStub,
        replication_status: ReplicationStatusStub,
    ) -> None:
        service = DeleteActionService(
            preconditions,
            replication_status,
            DeletionConfig(all_projects_name="Root"),
        )

        root = await service.describe(Project("Root"), "alice")
        other = await service.describe(Project("All-Projects"), "alice")

        assert root.enabled is False
        assert other.enabled is True

    @pytest.mark.asyncio
    async def test_hidden_without_permission(
        self,
        service: DeleteActionService,
        preconditions: DeletePreconditionsStub,
    ) -> None:
        preconditions.deny_user("mallory")

        description = await service.describe(Project("foo"), "mallory")

        assert description.visible is False
        assert description.enabled is True

    @pytest.mark.asyncio
    async def test_probe_failure_assumes_replicated(
        self,
        service: DeleteActionService,
        replication_status: ReplicationStatusStub,
    ) -> None:
        replication_status.set_failure_mode(True)

        description = await service.describe(Project("foo"), "alice")

        assert description.replicated is True
        assert description.label == CLEAN_UP_LABEL
