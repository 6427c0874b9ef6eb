"""Data access helpers for the append-only action log."""
from __future__ import annotations

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.orm import Session

from province_glow.models.action_log import ActionLogEntry, ActionType

__all__ = ["ActionLogRepository"]


class ActionLogRepository:
    """Append and query rate-limited action entries."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def append(self, identity: str, action: ActionType, created_at: datetime) -> ActionLogEntry:
        """Add an entry to the current transaction; committing is up to the caller."""
        entry = ActionLogEntry(identity=identity, action=action, created_at=created_at)
        self.session.add(entry)
        self.session.flush()
        return entry

    def latest_since(
        self,
        identity: str,
        action: ActionType,
        since: datetime,
    ) -> ActionLogEntry | None:
        """Return the most recent entry for ``identity``/``action`` at or after ``since``."""
        stmt = (
            select(ActionLogEntry)
            .where(
                ActionLogEntry.identity == identity,
                ActionLogEntry.action == action,
                ActionLogEntry.created_at >= since,
            )
            .order_by(ActionLogEntry.created_at.desc())
            .limit(1)
        )
        return self.session.scalars(stmt).first()
