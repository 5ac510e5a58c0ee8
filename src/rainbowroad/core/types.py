"""Core enums and type definitions."""

from enum import StrEnum


class ResolutionStatus(StrEnum):
    """Outcome of resolving a single repository."""

    SUCCESS = "success"
    INVALID_IDENTIFIER = "invalid_identifier"
    NOT_FOUND = "not_found"
    TRANSPORT_ERROR = "transport_error"
    DECODE_ERROR = "decode_error"
    TIMEOUT = "timeout"


class SourceName(StrEnum):
    """Upstream systems a resolver can talk to."""

    GITHUB = "github"
    RAINBOW_ROAD = "rainbow_road"
