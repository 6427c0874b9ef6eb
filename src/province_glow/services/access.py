"""Read/write eligibility for a visitor based on their resolved location."""

from __future__ import annotations

import logging

from province_glow.models.action_log import ActionType
from province_glow.repositories.province_repo import ProvinceRepository
from province_glow.schemas.geo import GeoInfo
from province_glow.services.geo import GeoResolver, is_local_address
from province_glow.services.rate_limit import CalendarDayWindow, RateLimiter

logger = logging.getLogger(__name__)


class AccessGate:
    """Decide whether a visitor may light up and post for their province.

    ``allowed`` is True only when the resolved region matches a canonical
    province. ``already_acted_today`` does not restrict reading; it only tells
    the caller whether to offer the light-up control.
    """

    def __init__(
        self,
        resolver: GeoResolver,
        provinces: ProvinceRepository,
        limiter: RateLimiter,
        day_window: CalendarDayWindow,
        allow_mock: bool = False,
    ) -> None:
        self.resolver = resolver
        self.provinces = provinces
        self.limiter = limiter
        self.day_window = day_window
        self.allow_mock = allow_mock

    async def evaluate(self, address: str, mock_province: str | None = None) -> GeoInfo:
        """Resolve ``address`` and report eligibility for its province."""
        mock = mock_province if self.allow_mock and mock_province else None
        if mock is None and is_local_address(address):
            return GeoInfo(identity=address)

        region = await self.resolver.resolve(address, mock_province=mock)
        if region is None:
            return GeoInfo(identity=address, is_mock=mock is not None)

        province = self.provinces.find_by_name_insensitive(region)
        if province is None:
            logger.info("Resolved region %r has no matching province", region)
            return GeoInfo(identity=address, is_mock=mock is not None)

        acted = not self.limiter.is_allowed(address, ActionType.LIGHT_UP, self.day_window)
        return GeoInfo(
            province=province.name,
            cn_name=province.cn_name,
            allowed=True,
            already_acted_today=acted,
            is_mock=mock is not None,
            identity=address,
        )
