"""Domain models for star resolution results and upstream payloads."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from rainbowroad.core.types import ResolutionStatus

# Error marker carried by successful results so the wire format always has a string
NO_ERROR = "<nil>"

# Star count reported for any failed resolution
FAILED_COUNT = -1


class RepoStars(BaseModel):
    """Result of resolving one repository: a star count or a failure reason."""

    model_config = ConfigDict(frozen=True)

    name: str
    stars: int
    error: str = NO_ERROR
    status: ResolutionStatus = ResolutionStatus.SUCCESS

    @property
    def success(self) -> bool:
        return self.status == ResolutionStatus.SUCCESS

    @classmethod
    def succeeded(cls, name: str, stars: int) -> RepoStars:
        return cls(name=name, stars=stars)

    @classmethod
    def failed(cls, name: str, reason: str, status: ResolutionStatus) -> RepoStars:
        return cls(name=name, stars=FAILED_COUNT, error=reason, status=status)


class GitHubRepository(BaseModel):
    """
    The subset of the GitHub repository payload we rely on.

    https://docs.github.com/en/rest/repos/repos#get-a-repository
    """

    model_config = ConfigDict(extra="ignore")

    full_name: str | None = None
    stargazers_count: Annotated[int, Field(ge=0, strict=True)]
