"""Schemas describing a visitor's resolved location."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GeoInfo(BaseModel):
    """Location and write eligibility for the current visitor."""

    province: str | None = Field(None, description="Canonical province name, if matched.")
    cn_name: str | None = Field(None, serialization_alias="cnName")
    allowed: bool = False
    already_acted_today: bool = Field(False, serialization_alias="alreadyActedToday")
    is_mock: bool = Field(False, serialization_alias="isMock")
    identity: str | None = None

    model_config = ConfigDict(populate_by_name=True)


class MockProvinceRequest(BaseModel):
    """Body for the development-only location override."""

    province: str = Field(..., min_length=1, max_length=64)
