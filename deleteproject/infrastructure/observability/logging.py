"""structlog setup for the deletion service.

Every entry carries the service name (``SERVICE_NAME``, the same value the
Prometheus collectors are labelled with) and, while a delete request is
running, its correlation id. Production renders one JSON object per line;
any other environment renders for a terminal.

A deletion entry in production:
    {"event": "project_deletion_completed", "level": "info",
     "timestamp": "2024-05-02T09:14:07.312Z", "service_name": "deleteproject",
     "correlation_id": "5f0c6c1e-...", "service": "DeletionCoordinator",
     "project": "team/foo", "path": "replicated"}

Usage:
    from deleteproject.infrastructure.observability import configure_structlog

    configure_structlog(environment="production")
"""

import logging
import os
from typing import Any, cast

import structlog
from structlog.typing import Processor

from deleteproject.infrastructure.observability.correlation import (
    correlation_id_processor,
)

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
SERVICE_NAME_ENV = "SERVICE_NAME"
DEFAULT_SERVICE_NAME = "deleteproject"


def _get_log_level() -> int:
    """Read LOG_LEVEL, falling back to INFO for unknown names."""
    level = getattr(logging, os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper(), None)
    return level if isinstance(level, int) else logging.INFO


def _service_name_processor(service_name: str) -> Processor:
    def add_service_name(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.setdefault("service_name", service_name)
        return event_dict

    return cast(Processor, add_service_name)


def configure_structlog(environment: str = "production") -> None:
    """Install the processor chain. Call once, at startup.

    Args:
        environment: "production" renders JSON; anything else renders for
            the console.
    """
    renderer: Processor
    if environment == "production":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _service_name_processor(
                os.getenv(SERVICE_NAME_ENV, DEFAULT_SERVICE_NAME)
            ),
            cast(Processor, correlation_id_processor),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger_for_service(
    service_name: str, component: str = "deletion"
) -> structlog.BoundLogger:
    """Logger bound to a service and component.

    Args:
        service_name: Usually the class name.
        component: "deletion" for the request path, "presentation" for the
            delete action description.
    """
    return structlog.get_logger().bind(service=service_name, component=component)
