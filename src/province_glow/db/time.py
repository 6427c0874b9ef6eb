# src/province_glow/db/time.py
"""Time utilities for database models and rate-limit windows."""

from datetime import UTC, datetime, tzinfo
from zoneinfo import ZoneInfo


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(UTC)


def local_zone(name: str | None) -> tzinfo | None:
    """Return the configured zone, or None to mean the server's local time."""
    return ZoneInfo(name) if name else None


def start_of_local_day(now: datetime, zone: tzinfo | None = None) -> datetime:
    """Return local midnight of the day containing ``now``, expressed in UTC.

    Args:
        now: Timezone-aware reference instant.
        zone: Zone defining the calendar day; None uses the server's local zone.
    """
    local = now.astimezone(zone) if zone is not None else now.astimezone()
    midnight = local.replace(hour=0, minute=0, second=0, microsecond=0)
    return midnight.astimezone(UTC)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive values read back from backends without tz support."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
