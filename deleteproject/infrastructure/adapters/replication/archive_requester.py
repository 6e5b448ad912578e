"""Remote archive requester talking to the local replication daemon.

Sends one DELETE request per replicated project deletion:

    DELETE http://<host>:<port>/gerrit/delete
        ?repoPath=<url-encoded repo path>
        &taskIdForDelayedRemoval=<correlation id>

with ``application/xml`` content and accept headers. The daemon answers 200
(archived) or 202 (scheduled); anything else, or no answer at all, is a
ReplicationTransportError carrying whatever body the daemon sent back.

The repository path is the ``<name>.git`` directory under the repository root
when it exists, else the bare ``<name>`` directory when that exists.
"""

from __future__ import annotations

from pathlib import Path
from urllib.parse import quote_plus

import httpx
import structlog

from deleteproject.application.ports.remote_archive import (
    ArchiveAcceptance,
    RemoteArchivePort,
)
from deleteproject.config.deletion_config import (
    DEFAULT_REPLICATION_DAEMON_CONFIG,
    ReplicationDaemonConfig,
)
from deleteproject.domain.errors import (
    ConfigurationUnreadableError,
    ReplicationTransportError,
)
from deleteproject.domain.models.project import GIT_SUFFIX
from deleteproject.infrastructure.adapters.replication.daemon_config import (
    DAEMON_PORT_PROPERTY,
    ReplicationSettings,
    ReplicationSettingsSource,
    settings_loader,
)

log = structlog.get_logger()

ACCEPTED_STATUS_CODES = frozenset({200, 202})
XML_MEDIA_TYPE = "application/xml"


class DaemonArchiveRequester(RemoteArchivePort):
    """RemoteArchivePort implementation over HTTP.

    Attributes:
        _load_settings: Loader for the configuration chain (repo root and port).
        _config: Daemon host, endpoint and timeout.
        _transport: Optional httpx transport, used by tests to stub the daemon.
    """

    def __init__(
        self,
        settings: ReplicationSettingsSource,
        config: ReplicationDaemonConfig = DEFAULT_REPLICATION_DAEMON_CONFIG,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the requester.

        Args:
            settings: Resolved configuration chain, or a loader for it that
                is called on every request.
            config: Daemon connection config.
            transport: Optional httpx transport override.
        """
        self._load_settings = settings_loader(settings)
        self._config = config
        self._transport = transport

    def resolve_repo_path(
        self, project_name: str, settings: ReplicationSettings | None = None
    ) -> str:
        """Repository path handed to the daemon for a project.

        ``<repo home>/<name>.git`` when that directory exists, else
        ``<repo home>/<name>`` when that one exists, else the ``.git`` form.

        Args:
            project_name: Name of the project.
            settings: Settings to use (default: loaded now).
        """
        settings = settings or self._load_settings()
        repo_home = (settings.repo_home or "").rstrip("/")
        with_suffix = f"{repo_home}/{project_name}{GIT_SUFFIX}"
        if Path(with_suffix).exists():
            return with_suffix
        bare = f"{repo_home}/{project_name}"
        if Path(bare).exists():
            return bare
        return with_suffix

    def build_delete_url(
        self,
        repo_path: str,
        correlation_id: str,
        settings: ReplicationSettings | None = None,
    ) -> str:
        """Build the daemon URL for a delete request.

        Args:
            repo_path: Repository path to archive.
            correlation_id: Task id for the delayed removal.
            settings: Settings to use (default: loaded now).

        Returns:
            Fully encoded request URL.

        Raises:
            ReplicationTransportError: If no daemon port is configured.
            ConfigurationUnreadableError: If the configured port is not a number.
        """
        settings = settings or self._load_settings()
        if not settings.daemon_port:
            raise ReplicationTransportError(
                repo_path, "replication daemon port is not configured"
            )
        try:
            port = int(settings.daemon_port)
        except ValueError as e:
            raise ConfigurationUnreadableError(
                str(settings.properties_path),
                f"{DAEMON_PORT_PROPERTY} is not a number: {settings.daemon_port!r}",
            ) from e

        return (
            f"http://{self._config.host}:{port}{self._config.delete_endpoint}"
            f"?repoPath={quote_plus(repo_path)}"
            f"&taskIdForDelayedRemoval={quote_plus(correlation_id)}"
        )

    async def schedule_removal(
        self, project_name: str, correlation_id: str
    ) -> ArchiveAcceptance:
        """Ask the daemon to archive the repository and schedule its removal.

        Args:
            project_name: Name of the project.
            correlation_id: Per-operation token tagging the delayed removal.

        Returns:
            ArchiveAcceptance with the daemon's acceptance status.

        Raises:
            ReplicationTransportError: If the daemon is unreachable, no port
                is configured, or the daemon answered with another status.
            ConfigurationUnreadableError: If the configuration chain cannot
                be read.
        """
        settings = self._load_settings()
        repo_path = self.resolve_repo_path(project_name, settings)
        if not settings.replication_configured:
            raise ReplicationTransportError(
                repo_path, "repository root is not configured"
            )
        url = self.build_delete_url(repo_path, correlation_id, settings)
        headers = {"Content-Type": XML_MEDIA_TYPE, "Accept": XML_MEDIA_TYPE}

        async with httpx.AsyncClient(transport=self._transport) as client:
            try:
                response = await client.delete(
                    url,
                    headers=headers,
                    timeout=self._config.request_timeout_seconds,
                )
            except httpx.HTTPError as e:
                log.error(
                    "archive_request_error",
                    project=project_name,
                    repo_path=repo_path,
                    correlation_id=correlation_id,
                    error=str(e),
                )
                raise ReplicationTransportError(repo_path, str(e)) from e

        if response.status_code not in ACCEPTED_STATUS_CODES:
            log.error(
                "archive_request_rejected",
                project=project_name,
                repo_path=repo_path,
                correlation_id=correlation_id,
                status_code=response.status_code,
            )
            raise ReplicationTransportError(
                repo_path,
                f"daemon answered {response.status_code}: {response.text}",
                status_code=response.status_code,
                response_body=response.text,
            )

        log.info(
            "archive_request_accepted",
            project=project_name,
            repo_path=repo_path,
            correlation_id=correlation_id,
            status_code=response.status_code,
        )
        return ArchiveAcceptance(
            project_name=project_name,
            repo_path=repo_path,
            correlation_id=correlation_id,
            status_code=response.status_code,
        )
