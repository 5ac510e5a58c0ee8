"""API schema definitions."""

from rainbowroad.api.schemas.base import APIBaseSchema
from rainbowroad.api.schemas.requests import RepoRequest, StarsRequest
from rainbowroad.api.schemas.responses import (
    HealthResponse,
    RepoStarsResponse,
    StarsResponse,
)

__all__ = [
    # Base
    "APIBaseSchema",
    # Requests
    "RepoRequest",
    "StarsRequest",
    # Responses
    "HealthResponse",
    "RepoStarsResponse",
    "StarsResponse",
]
