"""Province schemas."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProvinceOut(BaseModel):
    """Province counter as rendered on the map."""

    name: str
    cn_name: str | None = Field(None, serialization_alias="cnName")
    count: int = 0
    level: int = 0

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class LightUpResult(BaseModel):
    """Successful light-up with the province's new counter value."""

    success: bool = True
    count: int
