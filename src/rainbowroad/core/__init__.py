"""Core types, models, and utilities."""

from .exceptions import (
    ConfigurationError,
    RainbowRoadError,
    ServerResponseError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
    ValidationError,
)
from .identifiers import RepoName, is_valid_repo_name
from .models import FAILED_COUNT, NO_ERROR, GitHubRepository, RepoStars
from .types import ResolutionStatus, SourceName

__all__ = [
    # Types
    "ResolutionStatus",
    "SourceName",
    # Identifiers
    "RepoName",
    "is_valid_repo_name",
    # Models
    "FAILED_COUNT",
    "NO_ERROR",
    "GitHubRepository",
    "RepoStars",
    # Exceptions
    "ConfigurationError",
    "RainbowRoadError",
    "ServerResponseError",
    "UpstreamTimeoutError",
    "UpstreamUnavailableError",
    "ValidationError",
]
