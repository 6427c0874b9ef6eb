"""Append-only log of rate-limited actions."""

from __future__ import annotations

import enum
from datetime import datetime

from sqlalchemy import DateTime, Enum, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from province_glow.db.session import Base
from province_glow.db.time import utcnow


class ActionType(str, enum.Enum):
    """Actions subject to per-identity rate limits."""

    LIGHT_UP = "LIGHT_UP"
    POST_MESSAGE = "POST_MESSAGE"


class ActionLogEntry(Base):
    """One row per successful rate-limited action; never updated."""

    __tablename__ = "action_log"
    __table_args__ = (
        Index("ix_action_log_identity_action_created", "identity", "action", "created_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    identity: Mapped[str] = mapped_column(Text, nullable=False)
    action: Mapped[ActionType] = mapped_column(
        Enum(ActionType, name="action_type"),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
