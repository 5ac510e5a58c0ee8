"""Request and upstream-call counters."""

from __future__ import annotations

from typing import Protocol

from prometheus_client import CollectorRegistry, Counter


class StarsMetricsProtocol(Protocol):
    """Counters updated by the stars route and the GitHub resolver."""

    def record_request(self) -> None:
        """A /stars request was received."""
        ...

    def record_request_success(self) -> None:
        """A /stars request was answered with a result set."""
        ...

    def record_upstream_attempt(self) -> None:
        """An outbound call to GitHub is about to be made."""
        ...

    def record_upstream_success(self) -> None:
        """An outbound call to GitHub returned a usable star count."""
        ...


class NullStarsMetrics:
    """Metrics sink that records nothing. Default for library use."""

    def record_request(self) -> None:
        pass

    def record_request_success(self) -> None:
        pass

    def record_upstream_attempt(self) -> None:
        pass

    def record_upstream_success(self) -> None:
        pass


class PrometheusStarsMetrics:
    """Prometheus-backed implementation of StarsMetricsProtocol."""

    def __init__(self, registry: CollectorRegistry) -> None:
        """
        Register the counters on the given registry.

        Args:
            registry: Collector registry owned by the application
        """
        self.registry = registry
        self.stars_requests = Counter(
            "api_requests_stars_all",
            "The total number of processed requests from the stars api",
            registry=registry,
        )
        self.stars_requests_ok = Counter(
            "api_requests_stars_200",
            "The total number of 200 requests from the stars api",
            registry=registry,
        )
        self.github_requests = Counter(
            "api_requests_github_all",
            "The total number of outgoing requests to github",
            registry=registry,
        )
        self.github_requests_ok = Counter(
            "api_requests_github_200",
            "The total number of 200 requests to github",
            registry=registry,
        )

    def record_request(self) -> None:
        self.stars_requests.inc()

    def record_request_success(self) -> None:
        self.stars_requests_ok.inc()

    def record_upstream_attempt(self) -> None:
        self.github_requests.inc()

    def record_upstream_success(self) -> None:
        self.github_requests_ok.inc()
