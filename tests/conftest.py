"""Shared test fixtures for all tests."""

from __future__ import annotations

import pytest

from rainbowroad.config import RainbowRoadSettings
from rainbowroad.core.models import RepoStars
from rainbowroad.core.types import ResolutionStatus

GITHUB_API = "https://api.github.com"


# ============================================================================
# Environment Isolation
# ============================================================================


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's real token or server URL out of the tests."""
    for name in (
        "GITHUB_TOKEN",
        "RAINBOW_ROAD_GITHUB_TOKEN",
        "RAINBOW_ROAD_SERVER",
        "RAINBOW_ROAD_BATCH_TIMEOUT",
        "RAINBOW_ROAD_MAX_CONCURRENCY",
        "RAINBOW_ROAD_REQUEST_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def settings() -> RainbowRoadSettings:
    """Settings with a token and no .env file."""
    return RainbowRoadSettings(
        _env_file=None,
        github_token="test-token",
        request_timeout=5.0,
        max_concurrency=4,
    )


@pytest.fixture
def settings_no_token() -> RainbowRoadSettings:
    """Settings without a GitHub token."""
    return RainbowRoadSettings(_env_file=None, github_token=None)


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_success() -> RepoStars:
    return RepoStars.succeeded("kubernetes/kubernetes", 104000)


@pytest.fixture
def sample_failure() -> RepoStars:
    return RepoStars.failed(
        "nope/nope",
        "resource not found: nope/nope",
        ResolutionStatus.NOT_FOUND,
    )


def github_repo_url(identifier: str) -> str:
    """URL the resolver requests for an identifier."""
    return f"{GITHUB_API}/repos/{identifier}"


@pytest.fixture
def repo_url():
    """Provide the GitHub URL builder."""
    return github_repo_url
