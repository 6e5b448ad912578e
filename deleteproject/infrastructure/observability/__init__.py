"""structlog configuration and request correlation.

Usage:
    from deleteproject.infrastructure.observability import configure_structlog

    configure_structlog(environment="production")
"""

from deleteproject.infrastructure.observability.correlation import (
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
    start_correlation,
)
from deleteproject.infrastructure.observability.logging import (
    configure_structlog,
    get_logger_for_service,
)

__all__: list[str] = [
    "configure_structlog",
    "correlation_id_processor",
    "generate_correlation_id",
    "get_correlation_id",
    "get_logger_for_service",
    "set_correlation_id",
    "start_correlation",
]
