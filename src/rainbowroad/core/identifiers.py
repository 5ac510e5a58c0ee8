"""Repository identifier value object with validation."""

from __future__ import annotations

import re
from typing import ClassVar

from pydantic import BaseModel, Field, field_validator

from rainbowroad.core.exceptions import ValidationError

# Path segments that resolve to another URL
DOT_SEGMENTS = frozenset({".", ".."})


class RepoName(BaseModel):
    """A GitHub repository identifier in ``<owner>/<name>`` form."""

    value: str = Field(..., description="Repository identifier, e.g. kubernetes/kubernetes")

    # Exactly one slash, no whitespace, nothing that would alter the request URL
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[^/\s?#]+/[^/\s?#]+")

    @field_validator("value")
    @classmethod
    def validate_shape(cls, v: str) -> str:
        if not cls.is_valid(v):
            raise ValueError(f"Invalid repository identifier: {v}")
        return v

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check the shape without building an instance."""
        if not cls.PATTERN.fullmatch(value):
            return False
        return not any(part in DOT_SEGMENTS for part in value.split("/"))

    @property
    def api_path(self) -> str:
        """Path of this repository on the GitHub REST API."""
        return f"/repos/{self.value}"

    @classmethod
    def parse(cls, value: str) -> RepoName:
        """
        Parse an identifier string.

        Raises:
            ValidationError: if the identifier is not ``<owner>/<name>``
        """
        try:
            return cls(value=value)
        except ValueError as e:
            raise ValidationError(
                f"received invalid identifier: {value}",
                details={"identifier": value},
            ) from e

    def __str__(self) -> str:
        return self.value


def is_valid_repo_name(value: str) -> bool:
    """Check whether a string has the ``<owner>/<name>`` shape."""
    return RepoName.is_valid(value)
