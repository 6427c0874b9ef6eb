"""IP geolocation for visitors.

The lookup is best effort: every failure mode (timeouts, transport errors,
error statuses, unexpected payloads) degrades to "location unknown".
"""

from __future__ import annotations

import ipaddress
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from province_glow.core.settings import settings

logger = logging.getLogger(__name__)

DEFAULT_CLIENT_ADDRESS = "127.0.0.1"


def is_local_address(address: str | None) -> bool:
    """Return True for addresses that can never be geolocated (loopback, unspecified)."""
    if not address:
        return True
    candidate = address.strip().lower()
    if candidate == "localhost":
        return True
    try:
        ip = ipaddress.ip_address(candidate)
    except ValueError:
        return False
    if isinstance(ip, ipaddress.IPv6Address) and ip.ipv4_mapped is not None:
        ip = ip.ipv4_mapped
    return ip.is_loopback or ip.is_unspecified


def client_address(headers: Mapping[str, str], peer: str | None = None) -> str:
    """Derive the client identity from proxy headers.

    Uses the first ``X-Forwarded-For`` hop, then ``X-Real-IP``, then the socket
    peer, then the loopback address.
    """
    forwarded_for = headers.get("x-forwarded-for")
    if forwarded_for:
        first = forwarded_for.split(",")[0].strip()
        if first:
            return first
    real_ip = headers.get("x-real-ip")
    if real_ip and real_ip.strip():
        return real_ip.strip()
    return peer or DEFAULT_CLIENT_ADDRESS


class GeoResolver:
    """Resolve a network address to a region name through an HTTP lookup service."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.geo_lookup_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.geo_lookup_timeout_seconds
        self._transport = transport

    async def resolve(self, address: str, mock_province: str | None = None) -> str | None:
        """Return the region name for ``address`` or None when unknown.

        Args:
            address: Raw client address.
            mock_province: Stored override; when present no lookup is made.
        """
        if mock_province:
            return mock_province
        if is_local_address(address):
            return None
        try:
            ip = ipaddress.ip_address(address.strip())
        except ValueError:
            logger.warning("Skipping geolocation for malformed address %r", address)
            return None

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(f"{self.base_url}/{ip}")
                response.raise_for_status()
                payload = response.json()
        except httpx.TimeoutException:
            logger.warning("Geolocation lookup timed out for %s", address)
            return None
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Geolocation lookup failed for %s: %s", address, exc)
            return None
        except ValueError:
            logger.warning("Geolocation service returned a non-JSON body for %s", address)
            return None

        return self._extract_region(payload, address)

    @staticmethod
    def _extract_region(payload: Any, address: str) -> str | None:
        if not isinstance(payload, dict) or payload.get("status") != "success":
            logger.warning("Geolocation service could not place %s", address)
            return None
        region = payload.get("regionName")
        if not isinstance(region, str) or not region.strip():
            logger.warning("Geolocation response for %s has no region name", address)
            return None
        return region.strip()


def get_geo_resolver() -> GeoResolver:
    """Return a resolver configured from settings."""
    return GeoResolver()
