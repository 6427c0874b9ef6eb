# src/province_glow/schemas/message.py
"""Message board schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class MessageCreate(BaseModel):
    """Schema for posting a message to a province board."""

    # Length rules are enforced by the service so in-process callers get the same checks.
    content: str = Field(..., description="Free text; moderated before it is stored")


class MessageOut(BaseModel):
    """Public view of a stored message."""

    id: int
    content: str
    created_at: datetime = Field(serialization_alias="createdAt")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
