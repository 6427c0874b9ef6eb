"""Models describing messages left on a province's board."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from province_glow.db.session import Base
from province_glow.db.time import utcnow


class Message(Base):
    """Moderated, immutable message attached to a province."""

    __tablename__ = "message"
    __table_args__ = (Index("ix_message_province_created", "province_id", "created_at"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    province_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("province.id"),
        nullable=False,
    )
    # Opaque client identity; currently the raw network address.
    identity: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
