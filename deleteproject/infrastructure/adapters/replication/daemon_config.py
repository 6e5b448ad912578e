"""Replication daemon configuration chain.

Whether a host runs a replication daemon, where its repositories live and
which port it listens on are found by following a chain of files:

1. The daemon config file, a git-style config located by an environment
   variable (GIT_CONFIG by default) or ``~/.gitconfig``. Its
   ``core.gitmsconfig`` key names the daemon's application properties file.
2. The application properties file, which provides ``gerrit.repo.home``
   (the repository root) and ``gitms.local.jetty.port`` (the daemon port).

Any absent link ends the chain: the host is then treated as running no
replication at all. The chain is resolved once, at startup, into
ReplicationSettings that the probe and the archive requester share.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path

import structlog

from deleteproject.config.deletion_config import (
    DEFAULT_REPLICATION_DAEMON_CONFIG,
    ReplicationDaemonConfig,
)
from deleteproject.infrastructure.adapters.replication.config_files import (
    GitConfig,
    load_properties,
)

log = structlog.get_logger()

GITMS_CONFIG_SECTION = "core"
GITMS_CONFIG_KEY = "gitmsconfig"
REPO_HOME_PROPERTY = "gerrit.repo.home"
DAEMON_PORT_PROPERTY = "gitms.local.jetty.port"
DEFAULT_DAEMON_CONFIG_FILE = ".gitconfig"


@dataclass(frozen=True)
class ReplicationSettings:
    """Resolved view of the configuration chain.

    Attributes:
        daemon_config_path: Daemon config file that was consulted.
        properties_path: Application properties file, if the daemon config
            named one.
        repo_home: Repository root directory, if configured.
        daemon_port: Daemon port as written in the properties file, if set.
    """

    daemon_config_path: Path
    properties_path: Path | None = None
    repo_home: str | None = None
    daemon_port: str | None = None

    @property
    def replication_configured(self) -> bool:
        """True when a repository root was found, so probing makes sense."""
        return bool(self.repo_home)


# Settings, or a zero-argument loader that resolves (and may fail) per call
ReplicationSettingsSource = ReplicationSettings | Callable[[], ReplicationSettings]


def settings_loader(
    source: ReplicationSettingsSource,
) -> Callable[[], ReplicationSettings]:
    """Normalize a settings source into a loader.

    Adapters call the loader at the start of every operation, so an
    unreadable configuration chain surfaces as ConfigurationUnreadableError
    from the operation itself rather than at wiring time.
    """
    if isinstance(source, ReplicationSettings):
        return lambda: source
    return source


def resolve_daemon_config_path(
    environ: Mapping[str, str] | None = None,
    env_var: str = DEFAULT_REPLICATION_DAEMON_CONFIG.config_env_var,
    home: Path | None = None,
) -> Path:
    """Locate the daemon config file.

    Args:
        environ: Environment to consult (default: os.environ).
        env_var: Variable that overrides the location.
        home: Home directory (default: the current user's).

    Returns:
        Path named by the environment variable, else ``<home>/.gitconfig``.
    """
    environ = os.environ if environ is None else environ
    configured = environ.get(env_var, "").strip()
    if configured:
        return Path(configured)
    return (home or Path.home()) / DEFAULT_DAEMON_CONFIG_FILE


class DaemonConfigProvider:
    """Follows the configuration chain and returns ReplicationSettings.

    Usage:
        provider = DaemonConfigProvider.from_environment()
        settings = provider.load()
        if settings.replication_configured:
            ...
    """

    def __init__(self, daemon_config_path: Path) -> None:
        """Initialize the provider.

        Args:
            daemon_config_path: Path of the daemon config file.
        """
        self._daemon_config_path = daemon_config_path

    @classmethod
    def from_environment(
        cls,
        config: ReplicationDaemonConfig = DEFAULT_REPLICATION_DAEMON_CONFIG,
        environ: Mapping[str, str] | None = None,
        home: Path | None = None,
    ) -> DaemonConfigProvider:
        """Create a provider for the daemon config named by the environment.

        Args:
            config: Daemon connection config, for the override variable name.
            environ: Environment to consult (default: os.environ).
            home: Home directory (default: the current user's).

        Returns:
            A provider bound to the resolved daemon config path.
        """
        return cls(
            resolve_daemon_config_path(
                environ=environ, env_var=config.config_env_var, home=home
            )
        )

    @property
    def daemon_config_path(self) -> Path:
        """Path of the daemon config file."""
        return self._daemon_config_path

    def load(self) -> ReplicationSettings:
        """Resolve the chain.

        Returns:
            ReplicationSettings; fields stay None past the first absent link.

        Raises:
            ConfigurationUnreadableError: If a file in the chain exists but
                cannot be read or parsed.
        """
        settings = ReplicationSettings(daemon_config_path=self._daemon_config_path)

        git_config = GitConfig.load(self._daemon_config_path)
        if git_config is None:
            log.debug(
                "daemon_config_absent", path=str(self._daemon_config_path)
            )
            return settings

        properties_location = git_config.get_string(
            GITMS_CONFIG_SECTION, GITMS_CONFIG_KEY
        )
        if not properties_location:
            log.debug(
                "daemon_properties_not_configured",
                path=str(self._daemon_config_path),
            )
            return settings

        properties_path = Path(properties_location)
        properties = load_properties(properties_path)
        if properties is None:
            log.debug("daemon_properties_absent", path=str(properties_path))
            return ReplicationSettings(
                daemon_config_path=self._daemon_config_path,
                properties_path=properties_path,
            )

        resolved = ReplicationSettings(
            daemon_config_path=self._daemon_config_path,
            properties_path=properties_path,
            repo_home=properties.get(REPO_HOME_PROPERTY, "").strip() or None,
            daemon_port=properties.get(DAEMON_PORT_PROPERTY, "").strip() or None,
        )
        log.info(
            "replication_settings_resolved",
            properties_path=str(properties_path),
            repo_home=resolved.repo_home,
            daemon_port=resolved.daemon_port,
        )
        return resolved
