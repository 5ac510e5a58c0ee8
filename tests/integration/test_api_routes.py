"""Integration tests for API routes."""

from __future__ import annotations

import logging

import httpx
import pytest
import respx
from httpx import AsyncClient, Response

from rainbowroad.api.app import create_app
from rainbowroad.config import RainbowRoadSettings
from rainbowroad.resolution.aggregator import BatchAggregator
from rainbowroad.resolution.github import MISSING_TOKEN_WARNING, GitHubStarsResolver

pytestmark = [pytest.mark.integration]

GITHUB_API = "https://api.github.com"


def github_repo(full_name: str, stars: int) -> Response:
    return Response(200, json={"full_name": full_name, "stargazers_count": stars})


# ============================================================================
# Health Check Tests
# ============================================================================


class TestHealthEndpoint:
    """Tests for the /health endpoint."""

    async def test_health_returns_green(self, test_client: AsyncClient):
        response = await test_client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "green"
        assert isinstance(data["version"], str)

    @pytest.mark.parametrize("method", ["HEAD", "POST", "PUT", "DELETE", "OPTIONS"])
    async def test_health_other_methods_404(self, test_client: AsyncClient, method: str):
        response = await test_client.request(method, "/health")

        assert response.status_code == 404
        if method != "HEAD":
            assert response.text == "Method is not supported."


# ============================================================================
# Stars Endpoint Tests
# ============================================================================


class TestStarsEndpoint:
    """Tests for POST /stars."""

    @respx.mock
    async def test_single_repo(self, test_client: AsyncClient):
        respx.get(f"{GITHUB_API}/repos/rdelpret/cartographer").mock(
            return_value=github_repo("rdelpret/cartographer", 1)
        )

        response = await test_client.post(
            "/stars", json={"repos": [{"name": "rdelpret/cartographer"}]}
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert response.json() == {
            "repos": [{"name": "rdelpret/cartographer", "Stars": 1, "Error": "<nil>"}]
        }

    @respx.mock
    async def test_mixed_batch_keeps_order(self, test_client: AsyncClient):
        respx.get(f"{GITHUB_API}/repos/kubernetes/kubernetes").mock(
            return_value=github_repo("kubernetes/kubernetes", 104000)
        )
        respx.get(f"{GITHUB_API}/repos/nope/nope").mock(
            return_value=Response(404, json={"message": "Not Found"})
        )
        respx.get(f"{GITHUB_API}/repos/slow/down").mock(
            side_effect=httpx.ReadTimeout("read timed out")
        )

        response = await test_client.post(
            "/stars",
            json={
                "repos": [
                    {"name": "nope/nope"},
                    {"name": "invalid"},
                    {"name": "kubernetes/kubernetes"},
                    {"name": "slow/down"},
                ]
            },
        )

        assert response.status_code == 200
        assert response.json()["repos"] == [
            {"name": "nope/nope", "Stars": -1, "Error": "resource not found: nope/nope"},
            {"name": "invalid", "Stars": -1, "Error": "received invalid identifier: invalid"},
            {"name": "kubernetes/kubernetes", "Stars": 104000, "Error": "<nil>"},
            {"name": "slow/down", "Stars": -1, "Error": "request timed out: slow/down"},
        ]

    async def test_missing_name_is_invalid(self, test_client: AsyncClient):
        response = await test_client.post("/stars", json={"repos": [{}]})

        assert response.status_code == 200
        assert response.json() == {
            "repos": [{"name": "", "Stars": -1, "Error": "received invalid identifier: "}]
        }

    async def test_dot_segments_never_reach_github(self, test_client: AsyncClient):
        with respx.mock(assert_all_called=False) as router:
            response = await test_client.post("/stars", json={"repos": [{"name": "../users"}]})

        assert response.json()["repos"] == [
            {"name": "../users", "Stars": -1, "Error": "received invalid identifier: ../users"}
        ]
        assert len(router.calls) == 0

    @pytest.mark.parametrize("body", [{}, {"repos": None}, {"repos": []}])
    async def test_empty_batches(self, test_client: AsyncClient, body: dict):
        response = await test_client.post("/stars", json=body)

        assert response.status_code == 200
        assert response.json() == {"repos": []}

    @pytest.mark.parametrize(
        "content",
        [
            b"not json",
            b'{"repos": "kubernetes/kubernetes"}',
            b'{"repos": [{"name": 5}]}',
            b"",
        ],
    )
    async def test_malformed_body(self, test_client: AsyncClient, content: bytes):
        response = await test_client.post(
            "/stars", content=content, headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.text == "Malformed Request."

    @pytest.mark.parametrize("method", ["GET", "HEAD", "PUT", "DELETE", "OPTIONS"])
    async def test_other_methods_404(self, test_client: AsyncClient, method: str):
        response = await test_client.request(method, "/stars")

        assert response.status_code == 404
        if method != "HEAD":
            assert response.text == "Method is not supported."


# ============================================================================
# Metrics Tests
# ============================================================================


class TestMetricsEndpoint:
    """Tests for GET /metrics and the counters behind it."""

    @respx.mock
    async def test_counters(self, test_client: AsyncClient, metrics_registry):
        respx.get(f"{GITHUB_API}/repos/a/b").mock(return_value=github_repo("a/b", 3))
        respx.get(f"{GITHUB_API}/repos/c/d").mock(return_value=Response(404))

        await test_client.post("/stars", json={"repos": [{"name": "a/b"}, {"name": "c/d"}]})
        await test_client.post("/stars", content=b"nope")
        await test_client.get("/stars")

        def value(name: str) -> float | None:
            return metrics_registry.get_sample_value(f"{name}_total")

        assert value("api_requests_stars_all") == 3.0
        assert value("api_requests_stars_200") == 1.0
        assert value("api_requests_github_all") == 2.0
        assert value("api_requests_github_200") == 1.0

    async def test_exposition(self, test_client: AsyncClient):
        await test_client.post("/stars", json={"repos": []})

        response = await test_client.get("/metrics")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "api_requests_stars_all_total 1.0" in response.text
        assert "api_requests_github_all_total 0.0" in response.text


# ============================================================================
# Error Handling Tests
# ============================================================================


class TestErrorHandling:
    """Tests for error responses."""

    async def test_404_for_unknown_endpoint(self, test_client: AsyncClient):
        response = await test_client.get("/nonexistent")

        assert response.status_code == 404

    async def test_requests_are_logged(
        self,
        test_client: AsyncClient,
        caplog: pytest.LogCaptureFixture,
    ):
        with caplog.at_level(logging.INFO, logger="rainbowroad.api.app"):
            await test_client.get("/health")

        lines = [r.getMessage() for r in caplog.records if r.name == "rainbowroad.api.app"]
        assert any(line.startswith("GET") and "/health" in line and "200" in line for line in lines)


# ============================================================================
# Lifespan Tests
# ============================================================================


class TestLifespan:
    """Tests for startup and shutdown wiring."""

    async def test_aggregator_built_and_closed(
        self,
        settings_no_token: RainbowRoadSettings,
        caplog: pytest.LogCaptureFixture,
    ):
        app = create_app(settings_no_token)

        with caplog.at_level(logging.WARNING, logger="rainbowroad.resolution.github"):
            async with app.router.lifespan_context(app):
                aggregator = app.state.aggregator
                assert isinstance(aggregator, BatchAggregator)
                assert isinstance(aggregator.resolver, GitHubStarsResolver)
                assert aggregator.resolver.metrics is app.state.metrics
                assert aggregator.config.max_concurrency == settings_no_token.max_concurrency

                async with aggregator.resolver._get_client() as client:
                    pass

        assert MISSING_TOKEN_WARNING in caplog.text
        assert client.is_closed
