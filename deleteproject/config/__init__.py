"""Configuration module for deleteproject.

Available Configurations:
- DeletionConfig: Coordinator deployment switches
- ReplicationDaemonConfig: Local replication daemon endpoint
"""

from deleteproject.config.deletion_config import (
    DEFAULT_DELETION_CONFIG,
    DEFAULT_REPLICATION_DAEMON_CONFIG,
    HIDE_ON_PRESERVE_DELETION_CONFIG,
    DeletionConfig,
    ReplicationDaemonConfig,
)

__all__ = [
    "DeletionConfig",
    "ReplicationDaemonConfig",
    "DEFAULT_DELETION_CONFIG",
    "DEFAULT_REPLICATION_DAEMON_CONFIG",
    "HIDE_ON_PRESERVE_DELETION_CONFIG",
]
