"""Shared Pydantic schemas for operation results."""
from __future__ import annotations

from pydantic import BaseModel, Field


class ActionResult(BaseModel):
    """Outcome of a write operation as seen by the caller."""

    success: bool
    message: str | None = Field(None, description="Human-readable reason when rejected.")
