"""Business logic services for the Province Glow application."""

from .access import AccessGate
from .geo import GeoResolver
from .moderation import ContentModerator
from .province_service import ProvinceService
from .rate_limit import CalendarDayWindow, RateLimiter, RollingWindow

__all__ = [
    "AccessGate",
    "CalendarDayWindow",
    "ContentModerator",
    "GeoResolver",
    "ProvinceService",
    "RateLimiter",
    "RollingWindow",
]
