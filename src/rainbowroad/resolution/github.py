"""GitHub star count resolver."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from pydantic import ValidationError as SchemaError

from rainbowroad.core.exceptions import (
    UpstreamTimeoutError,
    UpstreamUnavailableError,
    ValidationError,
)
from rainbowroad.core.identifiers import RepoName
from rainbowroad.core.models import GitHubRepository, RepoStars
from rainbowroad.core.types import ResolutionStatus, SourceName
from rainbowroad.observability.metrics import StarsMetricsProtocol
from rainbowroad.resolution.base import AbstractResolver, ResolverConfig

if TYPE_CHECKING:
    from rainbowroad.config import RainbowRoadSettings

logger = logging.getLogger(__name__)

MISSING_TOKEN_WARNING = (
    "GITHUB_TOKEN environment variable not set. "
    "API requests to github will be rate limited"
)


class GitHubStarsResolver(AbstractResolver):
    """
    Resolves a repository identifier to its stargazer count.

    API Documentation: https://docs.github.com/en/rest/repos/repos#get-a-repository

    One GET per call, no retries. Every outcome, including transport
    failures and unexpected payloads, comes back as a RepoStars value.
    """

    SOURCE_NAME: ClassVar[SourceName] = SourceName.GITHUB
    BASE_URL: ClassVar[str] = "https://api.github.com"

    def _get_default_headers(self) -> dict[str, str]:
        headers = super()._get_default_headers()
        headers["Accept"] = "application/vnd.github+json"
        if self.config.api_key:
            headers["Authorization"] = f"token {self.config.api_key}"
        return headers

    @property
    def authenticated(self) -> bool:
        return bool(self.config.api_key)

    async def resolve(self, identifier: str) -> RepoStars:
        """Fetch the star count for one repository."""
        try:
            repo = RepoName.parse(identifier)
        except ValidationError as e:
            logger.info(e.message)
            return RepoStars.failed(identifier, e.message, ResolutionStatus.INVALID_IDENTIFIER)

        self.metrics.record_upstream_attempt()

        try:
            response = await self._make_request("GET", repo.api_path)
        except UpstreamTimeoutError as e:
            logger.warning(f"GitHub request for {identifier} timed out: {e.message}")
            return RepoStars.failed(
                identifier,
                f"request timed out: {identifier}",
                ResolutionStatus.TIMEOUT,
            )
        except UpstreamUnavailableError as e:
            logger.warning(f"GitHub request for {identifier} failed: {e.message}")
            return RepoStars.failed(identifier, e.message, ResolutionStatus.TRANSPORT_ERROR)

        if not response.is_success:
            # 401/403/404/5xx are all reported the same way
            logger.debug(f"GitHub answered {response.status_code} for {identifier}")
            return RepoStars.failed(
                identifier,
                f"resource not found: {identifier}",
                ResolutionStatus.NOT_FOUND,
            )

        try:
            payload = GitHubRepository.model_validate_json(response.content)
        except SchemaError as e:
            logger.warning(
                f"Unexpected GitHub payload for {identifier}: {e.error_count()} error(s)"
            )
            return RepoStars.failed(
                identifier,
                f"malformed response for {identifier}",
                ResolutionStatus.DECODE_ERROR,
            )

        if payload.full_name and payload.full_name.lower() != identifier.lower():
            # Renamed or transferred repositories answer through a redirect
            logger.debug(f"{identifier} resolved to {payload.full_name}")

        self.metrics.record_upstream_success()
        return RepoStars.succeeded(identifier, payload.stargazers_count)

    @classmethod
    def from_settings(
        cls,
        settings: "RainbowRoadSettings",
        metrics: StarsMetricsProtocol | None = None,
    ) -> "GitHubStarsResolver":
        """
        Create a resolver configured from settings.

        Logs a warning when no token is configured; requests still go out
        unauthenticated.
        """
        resolver = cls(
            ResolverConfig(
                api_key=settings.github_token,
                base_url=settings.github_api_url,
                timeout=settings.request_timeout,
            ),
            metrics=metrics,
        )
        if not resolver.authenticated:
            logger.warning(MISSING_TOKEN_WARNING)
        return resolver
