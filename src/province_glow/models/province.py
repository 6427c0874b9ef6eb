# src/province_glow/models/province.py
"""SQLAlchemy model for the provinces shown on the map."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from province_glow.db.session import Base
from province_glow.db.time import utcnow


class Province(Base):
    """Canonical province with its light-up counter.

    Rows are provisioned from the seed catalog and never deleted by the
    service; ``count`` only moves through the light-up operation.
    """

    __tablename__ = "province"
    __table_args__ = (CheckConstraint("count >= 0", name="ck_province_count_non_negative"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Case-sensitive canonical name, matched case-insensitively on lookup.
    name: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    cn_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # Display tier owned by the map layer.
    level: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )
