"""Resolution layer for fetching star counts from GitHub."""

from rainbowroad.resolution.aggregator import AggregatorConfig, BatchAggregator
from rainbowroad.resolution.base import AbstractResolver, ResolverConfig
from rainbowroad.resolution.github import GitHubStarsResolver

__all__ = [
    # Base
    "AbstractResolver",
    "ResolverConfig",
    # GitHub
    "GitHubStarsResolver",
    # Aggregation
    "AggregatorConfig",
    "BatchAggregator",
]
