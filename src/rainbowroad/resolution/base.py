"""Abstract base resolver with HTTP client management."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, ClassVar

import httpx
from pydantic import BaseModel, Field

from rainbowroad._version import __version__
from rainbowroad.core.exceptions import UpstreamTimeoutError, UpstreamUnavailableError
from rainbowroad.core.models import RepoStars
from rainbowroad.core.types import SourceName
from rainbowroad.observability.metrics import NullStarsMetrics, StarsMetricsProtocol


class ResolverConfig(BaseModel):
    """Configuration for a resolver."""

    api_key: str | None = None
    base_url: str | None = None
    timeout: float = Field(default=30.0, gt=0)


class AbstractResolver(ABC):
    """
    Abstract base class for single-item resolvers.

    Provides:
    - HTTP client management with connection pooling
    - A per-call deadline covering the whole request
    - Consistent translation of httpx errors
    """

    SOURCE_NAME: ClassVar[SourceName]
    BASE_URL: ClassVar[str]

    def __init__(
        self,
        config: ResolverConfig | None = None,
        metrics: StarsMetricsProtocol | None = None,
    ) -> None:
        self.config = config or ResolverConfig()
        self.metrics = metrics or NullStarsMetrics()
        self._client: httpx.AsyncClient | None = None

    @property
    def source_name(self) -> SourceName:
        """The upstream this resolver talks to."""
        return self.SOURCE_NAME

    @property
    def base_url(self) -> str:
        return self.config.base_url or self.BASE_URL

    @asynccontextmanager
    async def _get_client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Get or create HTTP client with proper lifecycle."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.config.timeout),
                headers=self._get_default_headers(),
                follow_redirects=True,
            )

        try:
            yield self._client
        except httpx.TimeoutException as e:
            raise UpstreamTimeoutError(
                message=str(e) or "request timed out",
                source=self.source_name.value,
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamUnavailableError(
                message=str(e) or type(e).__name__,
                source=self.source_name.value,
            ) from e

    def _get_default_headers(self) -> dict[str, str]:
        """Get default headers for requests. Override to add auth."""
        return {
            "User-Agent": f"rainbowroad/{__version__}",
            "Accept": "application/json",
        }

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _make_request(
        self,
        method: str,
        url: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Make a single HTTP request bounded by the configured deadline.

        Raises:
            UpstreamTimeoutError: the deadline expired
            UpstreamUnavailableError: the upstream could not be reached
        """
        async with self._get_client() as client:
            try:
                async with asyncio.timeout(self.config.timeout):
                    return await client.request(method, url, **kwargs)
            except TimeoutError as e:
                raise UpstreamTimeoutError(
                    message=f"no response within {self.config.timeout}s",
                    source=self.source_name.value,
                ) from e

    @abstractmethod
    async def resolve(self, identifier: str) -> RepoStars:
        """
        Resolve one identifier to a result.

        Implementations must not raise; every outcome is returned as a
        RepoStars value.
        """
        ...

    async def __aenter__(self) -> "AbstractResolver":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
