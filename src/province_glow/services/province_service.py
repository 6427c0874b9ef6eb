"""Public operations of the province map.

``ProvinceService`` is the boundary used by the HTTP endpoints and by any
in-process caller. Rejections are raised as ``DomainError`` subclasses;
read operations never raise for missing data.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from province_glow.core.provinces import PROVINCES
from province_glow.core.settings import Settings, settings as default_settings
from province_glow.db.time import local_zone, utcnow
from province_glow.models.action_log import ActionType
from province_glow.repositories.message_repo import MessageRepository
from province_glow.repositories.province_repo import ProvinceRepository
from province_glow.schemas.common import ActionResult
from province_glow.schemas.geo import GeoInfo
from province_glow.schemas.message import MessageOut
from province_glow.schemas.province import LightUpResult, ProvinceOut
from province_glow.services.access import AccessGate
from province_glow.services.errors import (
    ContentValidationError,
    ProvinceNotFoundError,
    RateLimitedError,
    StorageError,
)
from province_glow.services.geo import GeoResolver, get_geo_resolver
from province_glow.services.moderation import ContentModerator
from province_glow.services.rate_limit import (
    CalendarDayWindow,
    Clock,
    RateLimiter,
    RollingWindow,
)

logger = logging.getLogger(__name__)

ALREADY_LIT_MESSAGE = "Already lit up today"
TOO_FAST_MESSAGE = "Too fast. Wait a minute."


class ProvinceService:
    """Orchestrates location checks, rate limits and moderation over one session."""

    def __init__(
        self,
        db: Session,
        *,
        resolver: GeoResolver | None = None,
        moderator: ContentModerator | None = None,
        config: Settings | None = None,
        clock: Clock = utcnow,
    ) -> None:
        self.db = db
        self.config = config or default_settings
        self.resolver = resolver or get_geo_resolver()
        self.moderator = moderator or ContentModerator(self.config.banned_words)
        self.clock = clock

        self.provinces = ProvinceRepository(db)
        self.messages = MessageRepository(db)
        self.limiter = RateLimiter(db, clock=clock)
        self.day_window = CalendarDayWindow(local_zone(self.config.timezone))
        self.message_window = RollingWindow(self.config.message_cooldown_seconds)

    async def resolve_location(self, address: str, mock_province: str | None = None) -> GeoInfo:
        """Report the visitor's province and whether they may act on it.

        Storage faults degrade to an unknown location, like lookup failures.
        """
        gate = AccessGate(
            self.resolver,
            self.provinces,
            self.limiter,
            self.day_window,
            allow_mock=self.config.is_development,
        )
        try:
            return await gate.evaluate(address, mock_province)
        except SQLAlchemyError:
            logger.exception("Failed to evaluate access for %s", address)
            return GeoInfo(identity=address)

    def light_up(self, province_name: str, identity: str) -> LightUpResult:
        """Add one to ``province_name`` for ``identity``, at most once per local day.

        The counter increment and the action log entry commit together.

        Raises:
            RateLimitedError: ``identity`` already lit up a province today.
            ProvinceNotFoundError: No province has that exact name.
            StorageError: The write failed and was rolled back.
        """
        try:
            if not self.limiter.is_allowed(identity, ActionType.LIGHT_UP, self.day_window):
                wait = self.limiter.retry_after(identity, ActionType.LIGHT_UP, self.day_window)
                raise RateLimitedError(ALREADY_LIT_MESSAGE, retry_after=wait)

            count = self.provinces.increment_count(province_name)
            if count is None:
                self.db.rollback()
                raise ProvinceNotFoundError(province_name)

            self.limiter.record(identity, ActionType.LIGHT_UP)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to light up %s for %s", province_name, identity)
            raise StorageError("Failed to light up") from exc

        logger.info("%s lit up %s (count=%d)", identity, province_name, count)
        return LightUpResult(count=count)

    def post_message(self, province_name: str, identity: str, content: str) -> ActionResult:
        """Moderate and store a message on a province board.

        Raises:
            ContentValidationError: Content is blank or too long.
            RateLimitedError: ``identity`` posted within the cooldown window.
            ProvinceNotFoundError: No province has that exact name.
            StorageError: The write failed and was rolled back.
        """
        text = (content or "").strip()
        if not text:
            raise ContentValidationError("Message cannot be empty")
        # The length limit applies to the moderated text that gets stored.
        sanitized = self.moderator.sanitize(text)
        if len(sanitized) > self.config.message_max_length:
            raise ContentValidationError(
                f"Message must be at most {self.config.message_max_length} characters"
            )

        try:
            if not self.limiter.is_allowed(identity, ActionType.POST_MESSAGE, self.message_window):
                wait = self.limiter.retry_after(identity, ActionType.POST_MESSAGE, self.message_window)
                raise RateLimitedError(TOO_FAST_MESSAGE, retry_after=wait)

            if sanitized != text:
                logger.info("Redacted banned terms in message from %s", identity)

            province = self.provinces.get_by_name(province_name)
            if province is None:
                raise ProvinceNotFoundError(province_name)

            self.messages.create(
                province_id=province.id,
                identity=identity,
                content=sanitized,
                created_at=self.clock(),
            )
            self.limiter.record(identity, ActionType.POST_MESSAGE)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to post message to %s for %s", province_name, identity)
            raise StorageError("Failed to post") from exc

        return ActionResult(success=True)

    def list_messages(self, province_name: str) -> list[MessageOut]:
        """Return the newest messages for a province; empty when unknown or on failure."""
        try:
            province = self.provinces.get_by_name(province_name)
            if province is None:
                return []
            rows = self.messages.list_recent(province.id, self.config.message_feed_limit)
        except SQLAlchemyError:
            logger.exception("Failed to load messages for %s", province_name)
            return []
        return [MessageOut.model_validate(row) for row in rows]

    def list_provinces(self) -> list[ProvinceOut]:
        """Return province counters, falling back to the seed catalog with zero counts."""
        try:
            rows = self.provinces.list_all()
        except SQLAlchemyError:
            logger.exception("Failed to load provinces; serving seed catalog")
            rows = []
        if rows:
            return [ProvinceOut.model_validate(row) for row in rows]
        return [ProvinceOut(name=seed.name, cn_name=seed.cn_name) for seed in PROVINCES]

    def set_mock_province(self, identity: str, province_name: str) -> ActionResult:
        """Accept a location override for ``identity``; development mode only.

        The caller persists the override (the HTTP layer uses a cookie) and
        passes it back to ``resolve_location``.
        """
        if not self.config.is_development:
            return ActionResult(success=False, message="Mock locations are disabled")
        logger.info("Mock province for %s set to %s", identity, province_name)
        return ActionResult(success=True)
