"""Rainbow Road - concurrent GitHub star count aggregation."""

from rainbowroad._version import __version__
from rainbowroad.client import RainbowRoadClient, resolve_stars
from rainbowroad.core.identifiers import RepoName, is_valid_repo_name
from rainbowroad.core.models import NO_ERROR, RepoStars
from rainbowroad.core.types import ResolutionStatus
from rainbowroad.resolution.aggregator import AggregatorConfig, BatchAggregator
from rainbowroad.resolution.github import GitHubStarsResolver

__all__ = [
    # Client
    "RainbowRoadClient",
    "resolve_stars",
    # Resolution
    "AggregatorConfig",
    "BatchAggregator",
    "GitHubStarsResolver",
    # Models
    "NO_ERROR",
    "RepoName",
    "RepoStars",
    "ResolutionStatus",
    "is_valid_repo_name",
    # Version
    "__version__",
]
