"""Metrics collaborators injected into resolvers and routes."""

from rainbowroad.observability.metrics import (
    NullStarsMetrics,
    PrometheusStarsMetrics,
    StarsMetricsProtocol,
)

__all__ = [
    "NullStarsMetrics",
    "PrometheusStarsMetrics",
    "StarsMetricsProtocol",
]
