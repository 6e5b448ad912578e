"""Metrics endpoint for Prometheus scraping."""

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from deleteproject.infrastructure.monitoring.deletion_metrics import (
    get_deletion_metrics,
)

router = APIRouter(prefix="/v1", tags=["metrics"])


@router.get(
    "/metrics",
    summary="Prometheus metrics endpoint",
    description="Returns deletion metrics in Prometheus exposition format.",
    response_class=Response,
    responses={
        200: {
            "description": "Metrics in Prometheus format",
            "content": {"text/plain": {}},
        }
    },
)
async def get_metrics() -> Response:
    """Get deletion metrics in Prometheus format."""
    registry = get_deletion_metrics().get_registry()
    return Response(content=generate_latest(registry), media_type=CONTENT_TYPE_LATEST)
