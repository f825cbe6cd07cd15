"""Common pydantic schema utilities."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base schema with shared config."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)
