"""Unit test fixtures with HTTP mocking."""

from __future__ import annotations

from typing import Any

import pytest
import respx
from httpx import Response

from rainbowroad.resolution.base import ResolverConfig
from rainbowroad.resolution.github import GitHubStarsResolver

# ============================================================================
# HTTP Mocking Fixtures
# ============================================================================


@pytest.fixture
def respx_mock():
    """Provide a respx mock router for HTTP mocking.

    Use this when you need fine-grained control over mocked responses.
    The mock is automatically started and stopped by respx.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


# ============================================================================
# Resolver Configuration Fixtures
# ============================================================================


@pytest.fixture
def resolver_config() -> ResolverConfig:
    """Create a resolver config for testing."""
    return ResolverConfig(api_key="test-token", timeout=5.0)


@pytest.fixture
def resolver_config_no_key() -> ResolverConfig:
    """Create a resolver config without a token."""
    return ResolverConfig(api_key=None, timeout=5.0)


@pytest.fixture
async def resolver(resolver_config: ResolverConfig):
    """GitHub resolver with a token, closed after the test."""
    async with GitHubStarsResolver(resolver_config) as r:
        yield r


@pytest.fixture
async def resolver_no_key(resolver_config_no_key: ResolverConfig):
    """GitHub resolver without a token, closed after the test."""
    async with GitHubStarsResolver(resolver_config_no_key) as r:
        yield r


# ============================================================================
# Mock Response Helpers
# ============================================================================


def repo_payload(full_name: str, stars: int) -> dict[str, Any]:
    """Trimmed-down GitHub repository payload."""
    return {
        "id": 20580498,
        "full_name": full_name,
        "private": False,
        "html_url": f"https://github.com/{full_name}",
        "stargazers_count": stars,
        "watchers_count": stars,
        "forks_count": 39000,
    }


def mock_repo_response(full_name: str, stars: int) -> Response:
    """Create a mock GitHub repository response."""
    return Response(200, json=repo_payload(full_name, stars))


def mock_not_found_response() -> Response:
    """Create a mock GitHub 404 response."""
    return Response(
        404,
        json={
            "message": "Not Found",
            "documentation_url": "https://docs.github.com/rest/repos/repos#get-a-repository",
        },
    )


@pytest.fixture
def mock_responses():
    """Provide helper functions for creating mock responses."""
    return {
        "repo": mock_repo_response,
        "not_found": mock_not_found_response,
    }
