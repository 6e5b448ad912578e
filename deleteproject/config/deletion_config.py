"""Project deletion configuration.

Deployment-level switches for the deletion coordinator and connection
parameters for the local replication daemon, with environment variable
overrides.

Environment Variables (Deletion):
- DELETE_PROJECT_HIDE_ON_PRESERVE: Hide preserved projects instead of deleting (default: false)
- DELETE_PROJECT_REVIEW_DB_DISABLED: Skip the change database step (default: false)
- DELETE_PROJECT_ALL_PROJECTS_NAME: Root project that can never be deleted (default: All-Projects)

Environment Variables (Replication daemon):
- REPLICATION_DAEMON_HOST: Host the daemon listens on (default: 127.0.0.1)
- REPLICATION_DAEMON_DELETE_ENDPOINT: Path of the delete endpoint (default: /gerrit/delete)
- REPLICATION_DAEMON_CONFIG_ENV: Variable naming the daemon config file (default: GIT_CONFIG)
- REPLICATION_DAEMON_TIMEOUT_SECONDS: Timeout for daemon requests (default: 10.0)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or not a recognised boolean.

    Returns:
        Parsed boolean value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


def _get_float_env(key: str, default: float) -> float:
    """Get float environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or not a number.

    Returns:
        Parsed float value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _get_str_env(key: str, default: str) -> str:
    """Get string environment variable with default.

    Blank values fall back to the default.
    """
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass(frozen=True)
class DeletionConfig:
    """Deployment switches consumed by the deletion coordinator.

    Attributes:
        hide_on_preserve: When a preserve delete is requested, hide the
            project instead of removing anything.
        review_db_disabled: Change history no longer lives in the review
            database, so the non-replicated path skips the database step.
        all_projects_name: Name of the root project; its delete action is
            always disabled.
    """

    hide_on_preserve: bool = False
    review_db_disabled: bool = False
    all_projects_name: str = "All-Projects"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.all_projects_name:
            raise ValueError("all_projects_name must not be empty")

    @classmethod
    def from_environment(cls) -> DeletionConfig:
        """Create config from environment variables with defaults.

        Returns:
            DeletionConfig with values from environment or defaults.
        """
        return cls(
            hide_on_preserve=_get_bool_env("DELETE_PROJECT_HIDE_ON_PRESERVE", False),
            review_db_disabled=_get_bool_env("DELETE_PROJECT_REVIEW_DB_DISABLED", False),
            all_projects_name=_get_str_env(
                "DELETE_PROJECT_ALL_PROJECTS_NAME", "All-Projects"
            ),
        )


@dataclass(frozen=True)
class ReplicationDaemonConfig:
    """How to reach the local replication daemon.

    The daemon port itself is not here: it is read from the daemon's
    application properties through the configuration chain.

    Attributes:
        host: Host the daemon listens on.
        delete_endpoint: Path of the repository delete endpoint.
        config_env_var: Environment variable that overrides the location of
            the daemon configuration file.
        request_timeout_seconds: Timeout applied to each daemon request.
    """

    host: str = "127.0.0.1"
    delete_endpoint: str = "/gerrit/delete"
    config_env_var: str = "GIT_CONFIG"
    request_timeout_seconds: float = 10.0

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.host:
            raise ValueError("host must not be empty")
        if not self.delete_endpoint.startswith("/"):
            raise ValueError(
                f"delete_endpoint must start with '/', got {self.delete_endpoint!r}"
            )
        if self.request_timeout_seconds <= 0:
            raise ValueError(
                f"request_timeout_seconds must be positive, got {self.request_timeout_seconds}"
            )

    @classmethod
    def from_environment(cls) -> ReplicationDaemonConfig:
        """Create config from environment variables with defaults.

        Returns:
            ReplicationDaemonConfig with values from environment or defaults.
        """
        return cls(
            host=_get_str_env("REPLICATION_DAEMON_HOST", "127.0.0.1"),
            delete_endpoint=_get_str_env(
                "REPLICATION_DAEMON_DELETE_ENDPOINT", "/gerrit/delete"
            ),
            config_env_var=_get_str_env("REPLICATION_DAEMON_CONFIG_ENV", "GIT_CONFIG"),
            request_timeout_seconds=_get_float_env(
                "REPLICATION_DAEMON_TIMEOUT_SECONDS", 10.0
            ),
        )


DEFAULT_DELETION_CONFIG = DeletionConfig()

# Deployment that hides preserved projects rather than touching their stores
HIDE_ON_PRESERVE_DELETION_CONFIG = DeletionConfig(hide_on_preserve=True)

DEFAULT_REPLICATION_DAEMON_CONFIG = ReplicationDaemonConfig()
