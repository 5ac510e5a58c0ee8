"""Client for the stars server and in-process resolution helpers."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import httpx
from pydantic import ValidationError as SchemaError

from rainbowroad._version import __version__
from rainbowroad.api.schemas import RepoRequest, StarsRequest, StarsResponse
from rainbowroad.config import RainbowRoadSettings, resolve_server_url
from rainbowroad.core.exceptions import (
    ServerResponseError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)
from rainbowroad.core.models import RepoStars
from rainbowroad.core.types import ResolutionStatus, SourceName
from rainbowroad.resolution.aggregator import BatchAggregator

logger = logging.getLogger(__name__)


class RainbowRoadClient:
    """
    Client for a remote stars server.

    Usage:
        async with RainbowRoadClient() as client:
            results = await client.get_stars(["kubernetes/kubernetes", "istio/istio"])

    The server URL comes from RAINBOW_ROAD_SERVER unless passed explicitly.
    """

    def __init__(
        self,
        settings: RainbowRoadSettings | None = None,
        *,
        base_url: str | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            settings: Application settings. If not provided, loaded from environment.
            base_url: Server URL, overrides settings.server.

        Raises:
            ConfigurationError: if no valid server URL is available
        """
        self._settings = settings or RainbowRoadSettings()
        self.base_url = base_url.rstrip("/") if base_url else resolve_server_url(self._settings)
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> RainbowRoadClient:
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(self._settings.batch_timeout),
            headers={"User-Agent": f"rainbowroad/{__version__}"},
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    def _ensure_initialized(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError(
                "Client not initialized. Use 'async with RainbowRoadClient() as client:'"
            )
        return self._client

    async def get_stars(self, repos: Sequence[str]) -> list[RepoStars]:
        """
        Ask the server for the star counts of the given repositories.

        Returns:
            One result per repository, in request order

        Raises:
            UpstreamUnavailableError: the server could not be reached
            ServerResponseError: the server did not answer with a result set
        """
        client = self._ensure_initialized()
        body = StarsRequest(repos=[RepoRequest(name=r) for r in repos])
        logger.debug(f"Requesting stars for {len(repos)} repositories from {self.base_url}")

        try:
            response = await client.post("/stars", json=body.model_dump())
        except httpx.TimeoutException as e:
            raise UpstreamTimeoutError(
                message=f"stars server timed out: {self.base_url}",
                source=SourceName.RAINBOW_ROAD.value,
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamUnavailableError(
                message=str(e) or type(e).__name__,
                source=SourceName.RAINBOW_ROAD.value,
            ) from e

        if response.status_code != 200:
            raise ServerResponseError(
                f"stars server answered {response.status_code}: {response.text.strip()}",
                status_code=response.status_code,
            )

        try:
            payload = StarsResponse.model_validate_json(response.content)
        except SchemaError as e:
            raise ServerResponseError(
                "stars server returned an unexpected body",
                status_code=response.status_code,
                details={"errors": e.error_count()},
            ) from e

        # The wire format does not carry the failure class
        return [
            RepoStars(
                name=row.name,
                stars=row.stars,
                error=row.error,
                status=(
                    ResolutionStatus.SUCCESS if row.stars >= 0 else ResolutionStatus.NOT_FOUND
                ),
            )
            for row in payload.repos
        ]


async def resolve_stars(
    repos: Sequence[str],
    *,
    settings: RainbowRoadSettings | None = None,
) -> list[RepoStars]:
    """
    Resolve star counts in-process, talking to GitHub directly.

    For repeated batches, keep a BatchAggregator open instead.
    """
    async with BatchAggregator.from_settings(settings or RainbowRoadSettings()) as aggregator:
        return await aggregator.resolve_all(repos)
