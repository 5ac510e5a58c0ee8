"""Batch aggregator: concurrent resolution of many identifiers."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rainbowroad.core.models import RepoStars
from rainbowroad.core.types import ResolutionStatus
from rainbowroad.observability.metrics import StarsMetricsProtocol
from rainbowroad.resolution.base import AbstractResolver
from rainbowroad.resolution.github import GitHubStarsResolver

if TYPE_CHECKING:
    from rainbowroad.config import RainbowRoadSettings

logger = logging.getLogger(__name__)


@dataclass
class AggregatorConfig:
    """Configuration for batch resolution."""

    # Upper bound on resolver calls in flight for one batch
    max_concurrency: int = 16

    # Deadline for the entire batch (seconds), None for no deadline
    batch_timeout: float | None = None

    def __post_init__(self) -> None:
        if self.max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")


class BatchAggregator:
    """
    Resolves a batch of identifiers concurrently and returns results in
    input order.

    A fixed pool of workers drains a queue of (index, identifier) pairs and
    writes each result into the slot matching its index, so completion order
    never affects output order. The call returns once every worker is done.

    Usage:
        async with BatchAggregator(GitHubStarsResolver()) as aggregator:
            results = await aggregator.resolve_all(["kubernetes/kubernetes"])
    """

    def __init__(
        self,
        resolver: AbstractResolver,
        config: AggregatorConfig | None = None,
    ) -> None:
        self._resolver = resolver
        self.config = config or AggregatorConfig()

    @property
    def resolver(self) -> AbstractResolver:
        return self._resolver

    async def resolve_all(self, identifiers: Sequence[str]) -> list[RepoStars]:
        """
        Resolve every identifier, one result per input.

        Never raises for per-item problems; those come back as failed
        results in the matching slot.
        """
        if not identifiers:
            return []

        results: list[RepoStars | None] = [None] * len(identifiers)
        queue: asyncio.Queue[tuple[int, str]] = asyncio.Queue()
        for item in enumerate(identifiers):
            queue.put_nowait(item)

        worker_count = min(self.config.max_concurrency, len(identifiers))
        logger.info(f"Resolving {len(identifiers)} repositories with {worker_count} workers")

        async def worker() -> None:
            while True:
                try:
                    index, identifier = queue.get_nowait()
                except asyncio.QueueEmpty:
                    return
                results[index] = await self._try_resolve(identifier)

        try:
            async with asyncio.timeout(self.config.batch_timeout):
                await asyncio.gather(*(worker() for _ in range(worker_count)))
        except TimeoutError:
            pending = sum(1 for r in results if r is None)
            logger.warning(
                f"Batch deadline of {self.config.batch_timeout}s exceeded, "
                f"{pending} of {len(identifiers)} repositories unresolved"
            )

        return [
            result
            if result is not None
            else RepoStars.failed(
                identifiers[index],
                f"batch deadline exceeded: {identifiers[index]}",
                ResolutionStatus.TIMEOUT,
            )
            for index, result in enumerate(results)
        ]

    async def _try_resolve(self, identifier: str) -> RepoStars:
        """Run the resolver for one identifier with error handling."""
        try:
            return await self._resolver.resolve(identifier)
        except Exception as e:
            logger.exception(f"Resolver {self._resolver.source_name} failed for {identifier}")
            return RepoStars.failed(
                identifier,
                str(e) or type(e).__name__,
                ResolutionStatus.TRANSPORT_ERROR,
            )

    @classmethod
    def from_settings(
        cls,
        settings: "RainbowRoadSettings",
        metrics: StarsMetricsProtocol | None = None,
    ) -> "BatchAggregator":
        """Create an aggregator backed by a GitHub resolver built from settings."""
        return cls(
            GitHubStarsResolver.from_settings(settings, metrics),
            AggregatorConfig(
                max_concurrency=settings.max_concurrency,
                batch_timeout=settings.batch_timeout,
            ),
        )

    async def close(self) -> None:
        """Close the underlying resolver."""
        await self._resolver.close()

    async def __aenter__(self) -> "BatchAggregator":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
