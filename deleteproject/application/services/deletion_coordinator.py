"""Deletion coordinator.

Decides, per request, which deletion protocol runs and in what order the
collaborators are called. Every request is one linear run:

    Requested -> PreconditionsPassed -> {NonReplicated | Replicated | Hidden} -> Done

and every run ends with exactly one audit record, whether it succeeded or
stopped at its first error.

Failure policy:
- The first error aborts the remaining steps.
- Completed steps are never rolled back.
- Nothing is retried. Callers retry at the request level.

Non-replicated protocol:
1. Database delete (skipped when the review database is disabled)
2. Filesystem delete; a missing repository is reported as ProjectNotFoundError
3. Cache eviction

Replicated protocol:
1. Ask the replication daemon to archive the repository (unless preserve)
2. Delete change metadata, collecting the removed changes
3. Drop the repository from the in-process repository cache
4. Cache eviction (unless preserve)
5. Remove the changes from the index and broadcast them (if any)
6. Broadcast the project deletion

With preserve requested on a deployment that hides preserved projects,
either protocol is replaced by a single hide.
"""

from __future__ import annotations

import time

import structlog

from deleteproject.application.ports.cache_delete_handler import (
    CacheDeleteHandlerProtocol,
)
from deleteproject.application.ports.database_delete_handler import (
    DatabaseDeleteHandlerProtocol,
)
from deleteproject.application.ports.delete_log import DeleteLogProtocol
from deleteproject.application.ports.delete_preconditions import (
    DeletePreconditionsProtocol,
)
from deleteproject.application.ports.filesystem_delete_handler import (
    FilesystemDeleteHandlerProtocol,
)
from deleteproject.application.ports.hide_project import HideProjectProtocol
from deleteproject.application.ports.remote_archive import RemoteArchivePort
from deleteproject.application.ports.replication_status import (
    ReplicationStatusProtocol,
)
from deleteproject.application.services.base import LoggingMixin
from deleteproject.application.services.change_set_replicator import (
    ChangeSetReplicator,
)
from deleteproject.application.services.project_deletion_broadcaster import (
    ProjectDeletionBroadcaster,
)
from deleteproject.application.services.replication_probe import probe_replication
from deleteproject.config.deletion_config import (
    DEFAULT_DELETION_CONFIG,
    DeletionConfig,
)
from deleteproject.domain.errors import (
    ConcurrentModificationError,
    ProjectNotFoundError,
    RepositoryNotFoundError,
    error_kind,
)
from deleteproject.domain.models.project import (
    DeleteRequest,
    DeletionOutcome,
    DeletionPath,
    Project,
    ReplicationMode,
)
from deleteproject.infrastructure.monitoring.deletion_metrics import (
    REJECTED_PATH,
    DeletionMetrics,
)
from deleteproject.infrastructure.observability.correlation import start_correlation


class DeletionCoordinator(LoggingMixin):
    """Runs one delete request against the collaborators.

    Usage:
        coordinator = DeletionCoordinator(
            preconditions=preconditions,
            replication_status=probe,
            database=db_handler,
            filesystem=fs_handler,
            cache=cache_handler,
            hide=hide_project,
            delete_log=delete_log,
            archive=archive_requester,
            change_set_replicator=ChangeSetReplicator(index, transport),
            project_broadcaster=ProjectDeletionBroadcaster(transport),
        )
        path = await coordinator.delete(Project("foo"), DeleteRequest(), "alice")
    """

    def __init__(
        self,
        *,
        preconditions: DeletePreconditionsProtocol,
        replication_status: ReplicationStatusProtocol,
        database: DatabaseDeleteHandlerProtocol,
        filesystem: FilesystemDeleteHandlerProtocol,
        cache: CacheDeleteHandlerProtocol,
        hide: HideProjectProtocol,
        delete_log: DeleteLogProtocol,
        archive: RemoteArchivePort,
        change_set_replicator: ChangeSetReplicator,
        project_broadcaster: ProjectDeletionBroadcaster,
        config: DeletionConfig = DEFAULT_DELETION_CONFIG,
        metrics: DeletionMetrics | None = None,
    ) -> None:
        """Initialize the coordinator.

        Args:
            preconditions: Precondition gate.
            replication_status: Replication status probe.
            database: Change database collaborator.
            filesystem: Repository collaborator.
            cache: Cache collaborator.
            hide: Hide collaborator, used instead of deletion on preserve
                when the deployment is configured for it.
            delete_log: Audit sink.
            archive: Remote archive requester.
            change_set_replicator: Index removal and change broadcast.
            project_broadcaster: Project deletion broadcast.
            config: Deployment switches.
            metrics: Optional metrics collector.
        """
        self._preconditions = preconditions
        self._replication_status = replication_status
        self._database = database
        self._filesystem = filesystem
        self._cache = cache
        self._hide = hide
        self._delete_log = delete_log
        self._archive = archive
        self._change_set_replicator = change_set_replicator
        self._project_broadcaster = project_broadcaster
        self._config = config
        self._metrics = metrics
        self._init_logger()

    async def delete(
        self, project: Project, request: DeleteRequest, user: str
    ) -> DeletionPath:
        """Delete (or hide) a project.

        Args:
            project: The project to delete.
            request: Delete options.
            user: Acting identity, recorded in the audit entry.

        Returns:
            The deletion path that ran.

        Raises:
            DeletePermissionDeniedError: If the precondition gate refused.
            ProjectNotFoundError: If the repository was already gone.
            ConcurrentModificationError: If the database step lost a race.
            ReplicationTransportError: If the daemon did not accept the
                archive request.
            Exception: Any other collaborator failure, unchanged.
        """
        correlation_id = start_correlation()
        log = self._log_operation(
            "delete",
            project=project.name,
            user=user,
            preserve=request.preserve,
            force=request.force,
        )

        started = time.perf_counter()
        path: str = REJECTED_PATH
        error: BaseException | None = None
        try:
            await self._preconditions.assert_delete_permission(project, user)
            await self._preconditions.assert_can_be_deleted(project, request)

            mode = ReplicationMode.from_flag(
                probe_replication(
                    self._replication_status,
                    project.name,
                    assume_replicated_on_failure=False,
                    log=log,
                )
            )
            log = log.bind(replication_mode=mode.value)
            log.info("project_deletion_started")

            if request.preserve and self._config.hide_on_preserve:
                path = DeletionPath.HIDDEN.value
                await self._hide.apply(project)
            elif mode is ReplicationMode.REPLICATED:
                path = DeletionPath.REPLICATED.value
                await self._delete_replicated(project, request, correlation_id, log)
            else:
                path = DeletionPath.NON_REPLICATED.value
                await self._delete_non_replicated(project, request, log)

            log.info("project_deletion_completed", path=path)
            return DeletionPath(path)
        except BaseException as e:  # includes cancellation
            error = e
            log.warning(
                "project_deletion_failed",
                path=path,
                error_kind=error_kind(e),
                error=str(e),
            )
            raise
        finally:
            await self._record_outcome(
                DeletionOutcome(
                    project_name=project.name,
                    user=user,
                    request=request,
                    error=error,
                ),
                path,
                time.perf_counter() - started,
            )

    async def _delete_non_replicated(
        self, project: Project, request: DeleteRequest, log: structlog.BoundLogger
    ) -> None:
        if not self._config.review_db_disabled:
            await self._database.delete(project)

        try:
            await self._filesystem.delete(project, request.preserve)
        except RepositoryNotFoundError as e:
            log.warning("repository_not_found", step="filesystem_delete")
            raise ProjectNotFoundError(project.name) from e

        await self._cache.delete(project)

    async def _delete_replicated(
        self,
        project: Project,
        request: DeleteRequest,
        correlation_id: str,
        log: structlog.BoundLogger,
    ) -> None:
        # Must precede every local mutation
        if not request.preserve:
            acceptance = await self._archive.schedule_removal(
                project.name, correlation_id
            )
            log.info(
                "archive_scheduled",
                repo_path=acceptance.repo_path,
                status_code=acceptance.status_code,
            )

        try:
            changes = await self._database.replicated_delete_changes(project)
        except ConcurrentModificationError as e:
            log.error("concurrent_modification", step="delete_changes", error=str(e))
            raise

        try:
            await self._filesystem.delete_from_cache(project)
        except ProjectNotFoundError as e:
            log.error("repository_not_found", step="delete_from_cache", error=str(e))
            raise

        if not request.preserve:
            await self._cache.delete(project)

        # Local state is settled before peers hear about it
        if changes:
            await self._change_set_replicator.replicate(
                project.name, request.preserve, changes, correlation_id
            )
        await self._project_broadcaster.broadcast(
            project.name, request.preserve, correlation_id
        )

    async def _record_outcome(
        self, outcome: DeletionOutcome, path: str, duration_seconds: float
    ) -> None:
        log = self._log_operation("record_outcome", project=outcome.project_name)
        if self._metrics is not None:
            self._metrics.record_deletion(
                path, error_kind(outcome.error), duration_seconds
            )
        try:
            await self._delete_log.on_delete(outcome)
        except Exception:
            log.exception("delete_log_write_failed")
            # A failed request keeps its own error; a successful one fails here
            if outcome.succeeded:
                raise
