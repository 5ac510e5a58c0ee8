"""Response schemas for API endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from rainbowroad.api.schemas.base import APIBaseSchema
from rainbowroad.core.models import RepoStars


class RepoStarsResponse(APIBaseSchema):
    """Star count or failure reason for one repository."""

    name: str
    stars: int = Field(alias="Stars", description="Star count, -1 when resolution failed")
    error: str = Field(alias="Error", description="Failure reason, '<nil>' on success")

    @classmethod
    def from_result(cls, result: RepoStars) -> RepoStarsResponse:
        return cls(name=result.name, stars=result.stars, error=result.error)


class StarsResponse(APIBaseSchema):
    """Results for a stars request, index-aligned with the request."""

    repos: list[RepoStarsResponse]

    @classmethod
    def from_results(cls, results: list[RepoStars]) -> StarsResponse:
        return cls(repos=[RepoStarsResponse.from_result(r) for r in results])


class HealthResponse(APIBaseSchema):
    """Health check response."""

    status: Literal["green"]
    version: str
