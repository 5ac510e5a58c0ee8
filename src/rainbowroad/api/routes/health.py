"""Health check and metrics endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Response
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from rainbowroad._version import __version__
from rainbowroad.api.dependencies import MetricsRegistry
from rainbowroad.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    operation_id="getHealth",
    summary="Health check",
    description="Report that the server is up.",
)
async def health_check() -> HealthResponse:
    """Check API health status."""
    return HealthResponse(status="green", version=__version__)


@router.api_route(
    "/health",
    methods=["HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    include_in_schema=False,
)
async def health_method_not_supported() -> PlainTextResponse:
    """Only GET is served on /health."""
    return PlainTextResponse("Method is not supported.", status_code=404)


@router.get(
    "/metrics",
    operation_id="getMetrics",
    summary="Prometheus metrics",
    description="Request and upstream-call counters in Prometheus text format.",
)
async def get_metrics(registry: MetricsRegistry) -> Response:
    """Prometheus metrics endpoint."""
    return Response(generate_latest(registry), media_type=CONTENT_TYPE_LATEST)
