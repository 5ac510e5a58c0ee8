"""Request schemas for API endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from rainbowroad.api.schemas.base import APIBaseSchema


class RepoRequest(APIBaseSchema):
    """One repository in a stars request."""

    # A missing name resolves to an invalid-identifier failure, not a 400
    name: str = Field(default="", description="Repository identifier, <owner>/<name>")


class StarsRequest(APIBaseSchema):
    """Batch of repositories to resolve."""

    repos: list[RepoRequest] = Field(
        default_factory=list,
        description="Repositories to resolve, in the order results should be returned.",
    )

    @field_validator("repos", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    @property
    def identifiers(self) -> list[str]:
        return [repo.name for repo in self.repos]
