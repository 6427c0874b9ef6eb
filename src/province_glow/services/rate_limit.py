"""Per-identity rate limits backed by the action log.

An action is allowed when the identity has no log entry for it inside the
window. The check and the later ``record`` are separate statements, so two
concurrent requests from one identity can both pass the check; the worst
case is one extra light-up in a narrow gap, which the product accepts.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timedelta, tzinfo

from sqlalchemy.orm import Session

from province_glow.db.time import as_utc, start_of_local_day, utcnow
from province_glow.models.action_log import ActionLogEntry, ActionType
from province_glow.repositories.action_log_repo import ActionLogRepository

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


@dataclass(frozen=True)
class RollingWindow:
    """Trailing window of fixed length, e.g. the last 60 seconds."""

    seconds: float

    def start(self, now: datetime) -> datetime:
        return now - timedelta(seconds=self.seconds)

    def ends_at(self, last: datetime) -> datetime:
        return last + timedelta(seconds=self.seconds)


@dataclass(frozen=True)
class CalendarDayWindow:
    """Window covering the current local calendar day; resets at midnight."""

    zone: tzinfo | None = field(default=None)

    def start(self, now: datetime) -> datetime:
        return start_of_local_day(now, self.zone)

    def ends_at(self, last: datetime) -> datetime:
        return start_of_local_day(last, self.zone) + timedelta(days=1)


RateWindow = RollingWindow | CalendarDayWindow


class RateLimiter:
    """Answer "has identity X performed action A within window W"."""

    def __init__(self, db: Session, clock: Clock = utcnow) -> None:
        self.log = ActionLogRepository(db)
        self.clock = clock

    def _latest(self, identity: str, action: ActionType, window: RateWindow) -> ActionLogEntry | None:
        now = self.clock()
        return self.log.latest_since(identity, action, window.start(now))

    def is_allowed(self, identity: str, action: ActionType, window: RateWindow) -> bool:
        """Return True when no entry for ``identity``/``action`` falls inside ``window``."""
        return self._latest(identity, action, window) is None

    def retry_after(self, identity: str, action: ActionType, window: RateWindow) -> float:
        """Return the seconds until ``action`` is allowed again (0 when allowed now)."""
        latest = self._latest(identity, action, window)
        if latest is None:
            return 0.0
        remaining = window.ends_at(as_utc(latest.created_at)) - self.clock()
        return max(remaining.total_seconds(), 0.0)

    def record(self, identity: str, action: ActionType) -> ActionLogEntry:
        """Append a log entry in the caller's transaction."""
        entry = self.log.append(identity, action, self.clock())
        logger.debug("Recorded %s for %s", action.value, identity)
        return entry
