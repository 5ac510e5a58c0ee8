"""Custom exception hierarchy for rainbowroad."""

from typing import Any


class RainbowRoadError(Exception):
    """Base exception for all rainbowroad errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(RainbowRoadError):
    """Input validation failed."""

    pass


class ConfigurationError(RainbowRoadError):
    """Required configuration is missing or invalid."""

    pass


class UpstreamUnavailableError(RainbowRoadError):
    """Could not talk to an upstream HTTP API."""

    def __init__(
        self,
        message: str,
        source: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.source = source
        self.status_code = status_code


class UpstreamTimeoutError(UpstreamUnavailableError):
    """Upstream call did not complete before its deadline."""

    pass


class ServerResponseError(RainbowRoadError):
    """The stars server answered with something other than a result set."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.status_code = status_code
