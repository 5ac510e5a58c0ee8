"""Base schema configuration for API models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class APIBaseSchema(BaseModel):
    """
    Base schema for all API models.

    Wire names that differ from the attribute name are declared per field
    with an alias; both spellings are accepted on input.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
    )
