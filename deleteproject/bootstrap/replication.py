"""Bootstrap wiring for the replication configuration chain.

The daemon config, properties file and repository root are resolved once
and shared by the probe and the archive requester for the life of the
process.
"""

from __future__ import annotations

from structlog import get_logger

from deleteproject.config.deletion_config import ReplicationDaemonConfig
from deleteproject.domain.errors import ConfigurationUnreadableError
from deleteproject.infrastructure.adapters.replication.daemon_config import (
    DaemonConfigProvider,
    ReplicationSettings,
)

logger = get_logger()

_replication_daemon_config: ReplicationDaemonConfig | None = None
_replication_settings: ReplicationSettings | None = None


def get_replication_daemon_config() -> ReplicationDaemonConfig:
    """Get replication daemon connection configuration."""
    global _replication_daemon_config
    if _replication_daemon_config is None:
        _replication_daemon_config = ReplicationDaemonConfig.from_environment()
    return _replication_daemon_config


def get_replication_settings() -> ReplicationSettings:
    """Get the resolved replication configuration chain.

    A successful load is kept for the life of the process. A failed load is
    not, so the next call tries again.

    Raises:
        ConfigurationUnreadableError: If a file in the chain exists but
            cannot be read or parsed.
    """
    global _replication_settings
    if _replication_settings is None:
        provider = DaemonConfigProvider.from_environment(
            get_replication_daemon_config()
        )
        try:
            _replication_settings = provider.load()
        except ConfigurationUnreadableError as e:
            logger.error(
                "replication_settings_unreadable",
                daemon_config_path=str(provider.daemon_config_path),
                error=str(e),
            )
            raise
        if not _replication_settings.replication_configured:
            logger.warning(
                "replication_not_configured",
                daemon_config_path=str(provider.daemon_config_path),
                message="No repository root found, every project is non-replicated",
            )
    return _replication_settings


def reset_replication_settings() -> None:
    """Reset resolved settings (for testing only)."""
    global _replication_daemon_config, _replication_settings
    _replication_daemon_config = None
    _replication_settings = None
