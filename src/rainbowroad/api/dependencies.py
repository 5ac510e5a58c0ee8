"""FastAPI dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from prometheus_client import CollectorRegistry

from rainbowroad.observability.metrics import StarsMetricsProtocol
from rainbowroad.resolution.aggregator import BatchAggregator


async def get_aggregator(request: Request) -> BatchAggregator:
    """Get batch aggregator from app state."""
    return request.app.state.aggregator


async def get_metrics(request: Request) -> StarsMetricsProtocol:
    """Get metrics collaborator from app state."""
    return request.app.state.metrics


async def get_metrics_registry(request: Request) -> CollectorRegistry:
    """Get the Prometheus registry backing the metrics collaborator."""
    return request.app.state.metrics_registry


# Type aliases for cleaner dependency injection
Aggregator = Annotated[BatchAggregator, Depends(get_aggregator)]
Metrics = Annotated[StarsMetricsProtocol, Depends(get_metrics)]
MetricsRegistry = Annotated[CollectorRegistry, Depends(get_metrics_registry)]
