"""Data access helpers for province messages."""
from __future__ import annotations

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.orm import Session

from province_glow.models.message import Message

__all__ = ["MessageRepository"]


class MessageRepository:
    """Thin wrapper around database access for message entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(
        self,
        *,
        province_id: int,
        identity: str,
        content: str,
        created_at: datetime,
    ) -> Message:
        """Insert a message and flush it so it receives an identifier."""
        message = Message(
            province_id=province_id,
            identity=identity,
            content=content,
            created_at=created_at,
        )
        self.session.add(message)
        self.session.flush()
        return message

    def list_recent(self, province_id: int, limit: int) -> list[Message]:
        """Return the newest messages for a province, newest first."""
        stmt = (
            select(Message)
            .where(Message.province_id == province_id)
            .order_by(Message.created_at.desc(), Message.id.desc())
            .limit(limit)
        )
        return list(self.session.scalars(stmt))
