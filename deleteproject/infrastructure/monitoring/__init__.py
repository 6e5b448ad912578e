"""Prometheus metrics for project deletion."""

from deleteproject.infrastructure.monitoring.deletion_metrics import (
    DeletionMetrics,
    get_deletion_metrics,
    reset_deletion_metrics,
)

__all__ = ["DeletionMetrics", "get_deletion_metrics", "reset_deletion_metrics"]
