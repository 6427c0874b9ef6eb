# tests/test_geo.py
"""Tests for IP geolocation and client address handling."""

from typing import Any

import httpx
import pytest

from province_glow.services.geo import client_address, is_local_address

from tests.conftest import make_resolver


@pytest.mark.asyncio
async def test_resolves_region_name() -> None:
    resolver = make_resolver()
    assert await resolver.resolve("1.2.3.4") == "beijing"


@pytest.mark.asyncio
async def test_lookup_failure_status_returns_none() -> None:
    resolver = make_resolver()
    assert await resolver.resolve("203.0.113.7") is None


@pytest.mark.asyncio
async def test_http_error_returns_none() -> None:
    resolver = make_resolver(lambda request: httpx.Response(503, text="down"))
    assert await resolver.resolve("1.2.3.4") is None


@pytest.mark.asyncio
async def test_malformed_body_returns_none() -> None:
    resolver = make_resolver(lambda request: httpx.Response(200, text="<html>nope</html>"))
    assert await resolver.resolve("1.2.3.4") is None


@pytest.mark.asyncio
async def test_unexpected_shape_returns_none() -> None:
    resolver = make_resolver(lambda request: httpx.Response(200, json=["success", "Beijing"]))
    assert await resolver.resolve("1.2.3.4") is None


@pytest.mark.asyncio
async def test_missing_region_returns_none() -> None:
    resolver = make_resolver(
        lambda request: httpx.Response(200, json={"status": "success", "regionName": "  "})
    )
    assert await resolver.resolve("1.2.3.4") is None


@pytest.mark.asyncio
async def test_timeout_returns_none() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    resolver = make_resolver(handler)
    assert await resolver.resolve("1.2.3.4") is None


@pytest.mark.asyncio
async def test_network_error_returns_none() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    resolver = make_resolver(handler)
    assert await resolver.resolve("1.2.3.4") is None


@pytest.mark.asyncio
@pytest.mark.parametrize("address", ["127.0.0.1", "::1", "localhost", "", "::ffff:127.0.0.1"])
async def test_local_addresses_skip_lookup(address: str) -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={"status": "success", "regionName": "Beijing"})

    resolver = make_resolver(handler)
    assert await resolver.resolve(address) is None
    assert calls == []


@pytest.mark.asyncio
async def test_mock_province_short_circuits_lookup() -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(500)

    resolver = make_resolver(handler)
    assert await resolver.resolve("127.0.0.1", mock_province="Sichuan") == "Sichuan"
    assert calls == []


def test_is_local_address() -> None:
    assert is_local_address("127.0.0.5")
    assert is_local_address("0.0.0.0")
    assert not is_local_address("1.2.3.4")
    assert not is_local_address("2001:db8::1")


def test_client_address_prefers_first_forwarded_hop() -> None:
    headers = {"x-forwarded-for": "1.2.3.4, 10.0.0.1", "x-real-ip": "5.6.7.8"}
    assert client_address(headers, "10.0.0.2") == "1.2.3.4"


def test_client_address_falls_back_to_real_ip_then_peer() -> None:
    assert client_address({"x-real-ip": "5.6.7.8"}, "10.0.0.2") == "5.6.7.8"
    assert client_address({}, "10.0.0.2") == "10.0.0.2"
    assert client_address({}) == "127.0.0.1"


@pytest.mark.asyncio
@pytest.mark.parametrize("address", ["1.2.3.4\t5", "not-an-ip", "1.2.3.4/../admin"])
async def test_malformed_addresses_skip_lookup(address: str) -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={"status": "success", "regionName": "Beijing"})

    resolver = make_resolver(handler)
    assert await resolver.resolve(address) is None
    assert calls == []


@pytest.mark.asyncio
async def test_invalid_url_returns_none(mocker: Any) -> None:
    resolver = make_resolver()
    mocker.patch("httpx.AsyncClient.get", side_effect=httpx.InvalidURL("bad url"))
    assert await resolver.resolve("1.2.3.4") is None
