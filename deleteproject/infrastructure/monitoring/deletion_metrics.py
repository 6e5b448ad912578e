"""Project deletion metrics for Prometheus exposition.

Tracks how many delete requests ran down each path and how they ended, and
how long they took.

Metrics:
- project_deletions_total{path, outcome, service, environment}
- project_deletion_duration_seconds{path, service, environment}

``path`` is the DeletionPath value (non_replicated, replicated, hidden, or
"rejected" when the precondition gate stopped the request); ``outcome`` is
the error kind ("success", "not_found", "conflict", ...).
"""

from __future__ import annotations

import os
import threading

from prometheus_client import CollectorRegistry, Counter, Histogram

# Thread lock for singleton initialization
_metrics_lock = threading.Lock()

REJECTED_PATH = "rejected"


class DeletionMetrics:
    """Collects project deletion metrics.

    Attributes:
        project_deletions_total: Counter by path and outcome.
        project_deletion_duration_seconds: Histogram of request duration by path.
    """

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize the collector.

        Args:
            registry: Optional custom registry for testing isolation.
        """
        self._registry = registry or CollectorRegistry()
        self._environment = os.environ.get("ENVIRONMENT", "development")
        self._service_name = os.environ.get("SERVICE_NAME", "deleteproject")

        self.project_deletions_total = Counter(
            name="project_deletions_total",
            documentation="Project delete requests by path and outcome",
            labelnames=["path", "outcome", "service", "environment"],
            registry=self._registry,
        )

        self.project_deletion_duration_seconds = Histogram(
            name="project_deletion_duration_seconds",
            documentation="Duration of project delete requests",
            labelnames=["path", "service", "environment"],
            registry=self._registry,
        )

    def record_deletion(self, path: str, outcome: str, duration_seconds: float) -> None:
        """Record one finished delete request.

        Args:
            path: Deletion path taken, or "rejected".
            outcome: Error kind, "success" when the request completed.
            duration_seconds: Wall-clock duration of the request.
        """
        self.project_deletions_total.labels(
            path=path,
            outcome=outcome,
            service=self._service_name,
            environment=self._environment,
        ).inc()
        self.project_deletion_duration_seconds.labels(
            path=path,
            service=self._service_name,
            environment=self._environment,
        ).observe(duration_seconds)

    def get_registry(self) -> CollectorRegistry:
        """Get the collector registry.

        Returns:
            The Prometheus collector registry.
        """
        return self._registry


# Singleton instance
_deletion_metrics: DeletionMetrics | None = None


def get_deletion_metrics() -> DeletionMetrics:
    """Get the singleton DeletionMetrics instance (thread-safe).

    Returns:
        The global DeletionMetrics instance.
    """
    global _deletion_metrics
    if _deletion_metrics is None:
        with _metrics_lock:
            if _deletion_metrics is None:
                _deletion_metrics = DeletionMetrics()
    return _deletion_metrics


def reset_deletion_metrics() -> None:
    """Reset the singleton collector (for testing only)."""
    global _deletion_metrics
    with _metrics_lock:
        _deletion_metrics = None
