"""Bootstrap wiring for logging configuration."""

from __future__ import annotations

import os

from deleteproject.infrastructure.observability import configure_structlog

ENVIRONMENT_ENV = "ENVIRONMENT"


def configure_logging(environment: str | None = None) -> str:
    """Configure structlog for the service.

    Args:
        environment: Overrides the ENVIRONMENT variable (default: production).

    Returns:
        The environment logging was configured for.
    """
    resolved = environment or os.environ.get(ENVIRONMENT_ENV, "production")
    configure_structlog(environment=resolved)
    return resolved


__all__ = ["configure_logging"]
