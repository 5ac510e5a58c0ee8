"""Integration test fixtures for the HTTP API."""

from __future__ import annotations

from typing import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

from rainbowroad.api.app import create_app
from rainbowroad.config import RainbowRoadSettings
from rainbowroad.resolution.aggregator import AggregatorConfig, BatchAggregator
from rainbowroad.resolution.base import ResolverConfig
from rainbowroad.resolution.github import GitHubStarsResolver

# ============================================================================
# FastAPI Test Client Fixtures
# ============================================================================


@pytest.fixture
async def test_app(settings: RainbowRoadSettings):
    """
    Create test FastAPI application.

    ASGITransport does not run the lifespan, so the aggregator is wired
    here against the app's own metrics.
    """
    app = create_app(settings)

    resolver = GitHubStarsResolver(
        ResolverConfig(
            api_key=settings.github_token,
            base_url=settings.github_api_url,
            timeout=settings.request_timeout,
        ),
        metrics=app.state.metrics,
    )
    app.state.aggregator = BatchAggregator(
        resolver,
        AggregatorConfig(max_concurrency=settings.max_concurrency),
    )

    yield app

    # Cleanup
    await app.state.aggregator.close()


@pytest.fixture
async def test_client(test_app) -> AsyncIterator[AsyncClient]:
    """Create async HTTP test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def metrics_registry(test_app):
    """Prometheus registry of the test application."""
    return test_app.state.metrics_registry


# ============================================================================
# Marker Registration
# ============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as an integration test exercising the HTTP API",
    )
