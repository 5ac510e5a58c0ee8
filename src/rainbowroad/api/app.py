"""FastAPI application factory."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, Response
from prometheus_client import CollectorRegistry

from rainbowroad._version import __version__
from rainbowroad.api.routes import health_router, stars_router
from rainbowroad.config import RainbowRoadSettings
from rainbowroad.observability.metrics import PrometheusStarsMetrics

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Builds the batch aggregator on startup and closes its HTTP client on
    shutdown.
    """
    from rainbowroad.resolution.aggregator import BatchAggregator

    settings: RainbowRoadSettings = app.state.settings

    logger.info("Initializing batch aggregator...")
    app.state.aggregator = BatchAggregator.from_settings(settings, app.state.metrics)

    logger.info(
        f"Application startup complete, max_concurrency={settings.max_concurrency}"
    )

    yield

    logger.info("Shutting down application...")

    if getattr(app.state, "aggregator", None) is not None:
        await app.state.aggregator.close()

    logger.info("Application shutdown complete")


async def log_requests(request: Request, call_next) -> Response:
    """Log method, path, client address and duration of every request."""
    start = time.monotonic()
    response = await call_next(request)
    duration_ms = (time.monotonic() - start) * 1000

    client = request.client.host if request.client else "-"
    logger.info(
        f"{request.method:<8}{request.url.path:<20}{client:<20}"
        f"{response.status_code:<6}{duration_ms:.1f}ms"
    )
    return response


def create_app(
    settings: RainbowRoadSettings | None = None,
    *,
    title: str = "Rainbow Road",
    description: str = "Batch GitHub star count aggregation API",
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Application settings. If not provided, loaded from environment.
        title: API title for OpenAPI docs
        description: API description for OpenAPI docs

    Returns:
        Configured FastAPI application
    """
    settings = settings or RainbowRoadSettings()

    app = FastAPI(
        title=title,
        description=description,
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.state.settings = settings

    # Each app owns its registry so several apps can coexist in one process
    app.state.metrics_registry = CollectorRegistry()
    app.state.metrics = PrometheusStarsMetrics(app.state.metrics_registry)

    app.middleware("http")(log_requests)

    app.include_router(health_router)
    app.include_router(stars_router)

    return app

