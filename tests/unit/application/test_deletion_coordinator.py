"""Unit tests for DeletionCoordinator.

Key Test Scenarios:
1. Exactly one audit record per request, whatever the outcome
2. Non-replicated path order: database, filesystem, cache
3. Hide-on-preserve replaces deletion on both paths
4. Replicated path: archive first, same correlation id in the broadcast
5. Replicated preserve skips archive and cache eviction
6. Change broadcast only for a non-empty change set, before the project broadcast
7. Conflicts abort the replicated path without retry or broadcast
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from deleteproject.config.deletion_config import DeletionConfig
from deleteproject.domain.errors import (
    ConcurrentModificationError,
    DeletePermissionDeniedError,
    ProjectNotFoundError,
    ReplicationTransportError,
    RepositoryNotFoundError,
)
from deleteproject.domain.models.project import (
    DeleteRequest,
    DeletionPath,
    Project,
)
from deleteproject.infrastructure.observability.correlation import get_correlation_id
from tests.helpers.deletion_harness import DeletionHarness

FOO = Project("foo")
HIDE_ON_PRESERVE = DeletionConfig(hide_on_preserve=True)


class TestAuditRecord:
    """Every invocation produces exactly one audit record."""

    @pytest.mark.asyncio
    async def test_success_produces_one_record(self, harness: DeletionHarness) -> None:
        harness.add_project("foo")

        await harness.coordinator().delete(FOO, DeleteRequest(), "alice")

        assert len(harness.delete_log.entries) == 1
        outcome = harness.delete_log.entries[0]
        assert outcome.succeeded
        assert outcome.user == "alice"
        assert outcome.project_name == "foo"
        assert outcome.request == DeleteRequest()

    @pytest.mark.asyncio
    async def test_permission_denied_produces_one_record(
        self, harness: DeletionHarness
    ) -> None:
        harness.add_project("foo")
        harness.preconditions.deny_user("mallory")

        with pytest.raises(DeletePermissionDeniedError) as exc_info:
            await harness.coordinator().delete(FOO, DeleteRequest(), "mallory")

        assert harness.delete_log.entries[0].error is exc_info.value
        assert len(harness.delete_log.entries) == 1
        assert harness.store_calls() == []

    @pytest.mark.asyncio
    async def test_not_found_produces_one_record(self, harness: DeletionHarness) -> None:
        with pytest.raises(ProjectNotFoundError) as exc_info:
            await harness.coordinator().delete(FOO, DeleteRequest(), "alice")

        assert len(harness.delete_log.entries) == 1
        assert harness.delete_log.entries[0].error is exc_info.value

    @pytest.mark.asyncio
    async def test_unexpected_error_produces_one_record(
        self, harness: DeletionHarness
    ) -> None:
        harness.add_project("foo")
        harness.cache.delete = AsyncMock(side_effect=RuntimeError("cache is down"))

        with pytest.raises(RuntimeError, match="cache is down"):
            await harness.coordinator().delete(FOO, DeleteRequest(), "alice")

        assert len(harness.delete_log.entries) == 1
        assert isinstance(harness.delete_log.entries[0].error, RuntimeError)

    @pytest.mark.asyncio
    async def test_audit_is_written_last(self, harness: DeletionHarness) -> None:
        harness.add_project("foo", replicated=True)

        await harness.coordinator().delete(FOO, DeleteRequest(), "alice")

        assert harness.journal[-1] == "delete_log.on_delete:foo"

    @pytest.mark.asyncio
    async def test_audit_failure_after_error_keeps_original_error(
        self, harness: DeletionHarness
    ) -> None:
        harness.delete_log.on_delete = AsyncMock(side_effect=OSError("disk full"))

        with pytest.raises(ProjectNotFoundError):
            await harness.coordinator().delete(FOO, DeleteRequest(), "alice")

    @pytest.mark.asyncio
    async def test_audit_failure_after_success_is_raised(
        self, harness: DeletionHarness
    ) -> None:
        harness.add_project("foo")
        harness.delete_log.on_delete = AsyncMock(side_effect=OSError("disk full"))

        with pytest.raises(OSError, match="disk full"):
            await harness.coordinator().delete(FOO, DeleteRequest(), "alice")


class TestNonReplicatedPath:
    """Single-node protocol."""

    @pytest.mark.asyncio
    async def test_database_filesystem_cache_in_order(
        self, harness: DeletionHarness
    ) -> None:
        harness.add_project("foo", change_ids=[1, 2])

        path = await harness.coordinator().delete(FOO, DeleteRequest(), "alice")

        assert path is DeletionPath.NON_REPLICATED
        assert harness.store_calls() == [
            "db.delete:foo",
            "fs.delete:foo",
            "cache.delete:foo",
        ]
        assert not harness.filesystem.has_repository("foo")
        assert harness.archive.requests == []
        assert harness.transport.project_deletions == []

    @pytest.mark.asyncio
    async def test_preconditions_run_before_any_store(
        self, harness: DeletionHarness
    ) -> None:
        harness.add_project("foo")

        await harness.coordinator().delete(FOO, DeleteRequest(), "alice")

        assert harness.journal[:2] == [
            "preconditions.permission:foo",
            "preconditions.state:foo",
        ]

    @pytest.mark.asyncio
    async def test_missing_repository_is_not_found_and_skips_cache(
        self, harness: DeletionHarness
    ) -> None:
        harness.database.add_changes("foo", [7])

        with pytest.raises(ProjectNotFoundError) as exc_info:
            await harness.coordinator().delete(FOO, DeleteRequest(), "alice")

        assert not isinstance(exc_info.value, RepositoryNotFoundError)
        assert isinstance(exc_info.value.__cause__, RepositoryNotFoundError)
        assert harness.store_calls() == ["db.delete:foo", "fs.delete:foo"]
        assert harness.cache.evicted == []

    @pytest.mark.asyncio
    async def test_database_step_is_not_rolled_back(
        self, harness: DeletionHarness
    ) -> None:
        harness.database.add_changes("foo", [7])

        with pytest.raises(ProjectNotFoundError):
            await harness.coordinator().delete(FOO, DeleteRequest(), "alice")

        assert harness.database.change_ids("foo") == []

    @pytest.mark.asyncio
    async def test_database_failure_aborts_remaining_steps(
        self, harness: DeletionHarness
    ) -> None:
        harness.add_project("foo")
        harness.database.set_conflict(True)

        with pytest.raises(ConcurrentModificationError):
            await harness.coordinator().delete(FOO, DeleteRequest(), "alice")

        assert harness.store_calls() == ["db.delete:foo"]

    @pytest.mark.asyncio
    async def test_review_db_disabled_skips_database(
        self, harness: DeletionHarness
    ) -> None:
        harness.add_project("foo")
        coordinator = harness.coordinator(DeletionConfig(review_db_disabled=True))

        await coordinator.delete(FOO, DeleteRequest(), "alice")

        assert harness.store_calls() == ["fs.delete:foo", "cache.delete:foo"]

    @pytest.mark.asyncio
    async def test_preserve_without_hide_keeps_repository(
        self, harness: DeletionHarness
    ) -> None:
        harness.add_project("foo")

        await harness.coordinator().delete(FOO, DeleteRequest(preserve=True), "alice")

        assert harness.filesystem.deletions == [("foo", True)]
        assert harness.filesystem.has_repository("foo")
        assert harness.cache.evicted == ["foo"]

    @pytest.mark.asyncio
    async def test_preserve_with_hide_only_hides(
        self, harness: DeletionHarness
    ) -> None:
        harness.add_project("foo", change_ids=[1])

        path = await harness.coordinator(HIDE_ON_PRESERVE).delete(
            FOO, DeleteRequest(preserve=True), "alice"
        )

        assert path is DeletionPath.HIDDEN
        assert harness.store_calls() == ["hide.apply:foo"]
        assert harness.database.change_ids("foo") == [1]
        assert len(harness.delete_log.entries) == 1

    @pytest.mark.asyncio
    async def test_hide_config_ignored_without_preserve(
        self, harness: DeletionHarness
    ) -> None:
        harness.add_project("foo")

        await harness.coordinator(HIDE_ON_PRESERVE).delete(
            FOO, DeleteRequest(), "alice"
        )

        assert harness.hide.hidden == []
        assert harness.cache.evicted == ["foo"]


class TestReplicatedPath:
    """Clustered protocol."""

    @pytest.mark.asyncio
    async def test_full_sequence(self, harness: DeletionHarness) -> None:
        harness.add_project("foo", change_ids=[11, 12], replicated=True)

        path = await harness.coordinator().delete(FOO, DeleteRequest(), "alice")

        assert path is DeletionPath.REPLICATED
        assert harness.store_calls() == [
            "archive.schedule_removal:foo",
            "db.replicated_delete_changes:foo",
            "fs.delete_from_cache:foo",
            "cache.delete:foo",
            "index.delete_changes",
            "transport.change_deletion:foo",
            "transport.project_deletion:foo",
        ]

    @pytest.mark.asyncio
    async def test_archive_precedes_database_with_correlation_id(
        self, harness: DeletionHarness
    ) -> None:
        harness.add_project("foo", replicated=True)

        await harness.coordinator().delete(FOO, DeleteRequest(), "alice")

        journal = harness.store_calls()
        assert journal.index("archive.schedule_removal:foo") < journal.index(
            "db.replicated_delete_changes:foo"
        )
        [(project_name, correlation_id)] = harness.archive.requests
        assert project_name == "foo"
        assert correlation_id

    @pytest.mark.asyncio
    async def test_same_correlation_id_in_archive_and_broadcasts(
        self, harness: DeletionHarness
    ) -> None:
        harness.add_project("foo", change_ids=[5], replicated=True)

        await harness.coordinator().delete(FOO, DeleteRequest(), "alice")

        correlation_id = harness.archive.requests[0][1]
        assert harness.transport.project_deletions[0].correlation_id == correlation_id
        assert harness.transport.change_deletions[0].correlation_id == correlation_id
        assert get_correlation_id() == correlation_id

    @pytest.mark.asyncio
    async def test_each_operation_gets_a_fresh_correlation_id(
        self, harness: DeletionHarness
    ) -> None:
        harness.add_project("foo", replicated=True)
        harness.add_project("bar", replicated=True)
        coordinator = harness.coordinator()

        await coordinator.delete(FOO, DeleteRequest(), "alice")
        await coordinator.delete(Project("bar"), DeleteRequest(), "alice")

        first, second = (cid for _, cid in harness.archive.requests)
        assert first != second

    @pytest.mark.asyncio
    async def test_preserve_skips_archive_and_cache(
        self, harness: DeletionHarness
    ) -> None:
        harness.add_project("foo", replicated=True)

        await harness.coordinator().delete(FOO, DeleteRequest(preserve=True), "alice")

        assert harness.archive.requests == []
        assert harness.cache.evicted == []
        assert harness.database.replicated_deletions == ["foo"]
        assert harness.filesystem.cache_evictions == ["foo"]
        [broadcast] = harness.transport.project_deletions
        assert broadcast.preserve is True
        assert broadcast.correlation_id

    @pytest.mark.asyncio
    async def test_preserve_with_hide_only_hides(
        self, harness: DeletionHarness
    ) -> None:
        harness.add_project("foo", replicated=True)

        path = await harness.coordinator(HIDE_ON_PRESERVE).delete(
            FOO, DeleteRequest(preserve=True), "alice"
        )

        assert path is DeletionPath.HIDDEN
        assert harness.store_calls() == ["hide.apply:foo"]
        assert harness.transport.project_deletions == []

    @pytest.mark.asyncio
    async def test_change_broadcast_carries_exactly_the_removed_ids(
        self, harness: DeletionHarness
    ) -> None:
        harness.add_project("foo", change_ids=[3, 1, 2], replicated=True)

        await harness.coordinator().delete(FOO, DeleteRequest(), "alice")

        assert harness.index.deleted_change_ids == [(3, 1, 2)]
        [broadcast] = harness.transport.change_deletions
        assert broadcast.change_ids == (3, 1, 2)
        assert broadcast.project_name == "foo"

    @pytest.mark.asyncio
    async def test_empty_change_set_skips_change_broadcast(
        self, harness: DeletionHarness
    ) -> None:
        harness.add_project("foo", replicated=True)

        await harness.coordinator().delete(FOO, DeleteRequest(), "alice")

        assert harness.index.deleted_change_ids == []
        assert harness.transport.change_deletions == []
        assert len(harness.transport.project_deletions) == 1

    @pytest.mark.asyncio
    async def test_conflict_is_reraised_and_aborts(
        self, harness: DeletionHarness
    ) -> None:
        harness.add_project("foo", change_ids=[1], replicated=True)
        harness.database.set_conflict(True)

        with pytest.raises(ConcurrentModificationError) as exc_info:
            await harness.coordinator().delete(FOO, DeleteRequest(), "alice")

        assert type(exc_info.value) is ConcurrentModificationError
        assert len(harness.archive.requests) == 1
        assert harness.store_calls() == [
            "archive.schedule_removal:foo",
            "db.replicated_delete_changes:foo",
        ]
        assert harness.transport.project_deletions == []
        assert harness.delete_log.entries[0].error is exc_info.value

    @pytest.mark.asyncio
    async def test_missing_repository_is_reraised_unchanged(
        self, harness: DeletionHarness
    ) -> None:
        harness.replication_status.set_replicated("foo")

        with pytest.raises(RepositoryNotFoundError):
            await harness.coordinator().delete(FOO, DeleteRequest(), "alice")

        assert harness.cache.evicted == []
        assert harness.transport.project_deletions == []

    @pytest.mark.asyncio
    async def test_archive_failure_aborts_before_database(
        self, harness: DeletionHarness
    ) -> None:
        harness.add_project("foo", change_ids=[1], replicated=True)
        harness.archive.set_failure_mode(True)

        with pytest.raises(ReplicationTransportError):
            await harness.coordinator().delete(FOO, DeleteRequest(), "alice")

        assert harness.store_calls() == ["archive.schedule_removal:foo"]
        assert harness.database.change_ids("foo") == [1]

    @pytest.mark.asyncio
    async def test_broadcast_failure_keeps_local_mutations(
        self, harness: DeletionHarness
    ) -> None:
        harness.add_project("foo", change_ids=[1], replicated=True)
        harness.transport.replicate_project_deletion = AsyncMock(
            side_effect=ConnectionError("peer unreachable")
        )

        with pytest.raises(ConnectionError):
            await harness.coordinator().delete(FOO, DeleteRequest(), "alice")

        assert harness.database.change_ids("foo") == []
        assert harness.cache.evicted == ["foo"]
        assert harness.index.deleted_change_ids == [(1,)]


class TestReplicationProbe:
    """Probe handling at the coordinator entry."""

    @pytest.mark.asyncio
    async def test_probe_failure_falls_back_to_non_replicated(
        self, harness: DeletionHarness
    ) -> None:
        harness.add_project("foo", replicated=True)
        harness.replication_status.set_failure_mode(True)

        path = await harness.coordinator().delete(FOO, DeleteRequest(), "alice")

        assert path is DeletionPath.NON_REPLICATED
        assert harness.archive.requests == []

    @pytest.mark.asyncio
    async def test_probe_not_consulted_when_preconditions_fail(
        self, harness: DeletionHarness
    ) -> None:
        harness.add_project("foo")
        harness.preconditions.mark_undeletable("foo")

        with pytest.raises(DeletePermissionDeniedError):
            await harness.coordinator().delete(FOO, DeleteRequest(), "alice")

        assert harness.replication_status.probed == []

    @pytest.mark.asyncio
    async def test_force_passes_state_check(self, harness: DeletionHarness) -> None:
        harness.add_project("foo")
        harness.preconditions.mark_undeletable("foo")

        await harness.coordinator().delete(FOO, DeleteRequest(force=True), "alice")

        assert harness.cache.evicted == ["foo"]


class TestMetrics:
    """One metrics sample per invocation."""

    @pytest.mark.asyncio
    async def test_success_counted_by_path(self, harness: DeletionHarness) -> None:
        harness.add_project("foo", replicated=True)

        await harness.coordinator().delete(FOO, DeleteRequest(), "alice")

        assert harness.deletion_count("replicated", "success") == 1.0

    @pytest.mark.asyncio
    async def test_rejection_counted(self, harness: DeletionHarness) -> None:
        harness.preconditions.deny_user("mallory")

        with pytest.raises(DeletePermissionDeniedError):
            await harness.coordinator().delete(FOO, DeleteRequest(), "mallory")

        assert harness.deletion_count("rejected", "permission_denied") == 1.0

    @pytest.mark.asyncio
    async def test_not_found_counted(self, harness: DeletionHarness) -> None:
        with pytest.raises(ProjectNotFoundError):
            await harness.coordinator().delete(FOO, DeleteRequest(), "alice")

        assert harness.deletion_count("non_replicated", "not_found") == 1.0
