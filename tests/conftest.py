# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from datetime import UTC, datetime, timedelta
from typing import Any

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("PYTEST_RUNNING", "true")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "test")

from province_glow.api.v1.dependencies import get_province_service  # noqa: E402
from province_glow.core.settings import Settings  # noqa: E402
from province_glow.db.session import Base  # noqa: E402
from province_glow.db.session import get_db as app_get_session  # noqa: E402
from province_glow.main import app as fastapi_app  # noqa: E402
from province_glow.models import Province  # noqa: E402
from province_glow.services.geo import GeoResolver  # noqa: E402
from province_glow.services.moderation import ContentModerator  # noqa: E402
from province_glow.services.province_service import ProvinceService  # noqa: E402

TEST_DB_URL = "sqlite://"
GEO_BASE_URL = "http://geo.test/json"

# Addresses known to the fake geolocation service and the region it reports.
GEO_REGIONS: dict[str, str] = {
    "1.2.3.4": "beijing",
    "5.6.7.8": "Shanghai",
    "9.9.9.9": "Bavaria",
}


class FakeClock:
    """Controllable replacement for ``utcnow``."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


def geo_handler(request: httpx.Request) -> httpx.Response:
    """Answer like ip-api.com for the addresses in ``GEO_REGIONS``."""
    address = request.url.path.rsplit("/", 1)[-1]
    region = GEO_REGIONS.get(address)
    if region is None:
        return httpx.Response(200, json={"status": "fail", "message": "reserved range"})
    return httpx.Response(200, json={"status": "success", "regionName": region})


def make_resolver(handler: Callable[[httpx.Request], httpx.Response] = geo_handler) -> GeoResolver:
    return GeoResolver(base_url=GEO_BASE_URL, timeout=1.0, transport=httpx.MockTransport(handler))


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def test_settings() -> Settings:
    """Development-mode settings with a single banned term and a UTC day boundary."""
    return Settings(
        ENVIRONMENT="development",
        TIMEZONE="UTC",
        BANNED_WORDS=["foo"],
        MESSAGE_COOLDOWN_SECONDS=60,
        MESSAGE_FEED_LIMIT=50,
        MESSAGE_MAX_LENGTH=200,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(datetime(2026, 10, 18, 4, 0, tzinfo=UTC))


@pytest.fixture()
def resolver() -> GeoResolver:
    return make_resolver()


@pytest.fixture()
def provinces(db_session: Session) -> dict[str, Province]:
    """Seed Beijing (count 10) and Shanghai (count 0)."""
    rows = {
        "Beijing": Province(name="Beijing", cn_name="北京", count=10, level=2),
        "Shanghai": Province(name="Shanghai", cn_name="上海", count=0, level=0),
    }
    db_session.add_all(rows.values())
    db_session.commit()
    return rows


@pytest.fixture()
def service(
    db_session: Session,
    resolver: GeoResolver,
    test_settings: Settings,
    clock: FakeClock,
) -> ProvinceService:
    return ProvinceService(
        db_session,
        resolver=resolver,
        moderator=ContentModerator(test_settings.banned_words),
        config=test_settings,
        clock=clock,
    )


@pytest.fixture()
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture()
def api_overrides(
    app: FastAPI,
    db_session: Session,
    resolver: GeoResolver,
    test_settings: Settings,
) -> Iterator[dict[Callable[..., Any], Callable[..., Any]]]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    def _get_service_override() -> ProvinceService:
        return ProvinceService(db_session, resolver=resolver, config=test_settings)

    overrides: dict[Callable[..., Any], Callable[..., Any]] = {
        app_get_session: _get_session_override,
        get_province_service: _get_service_override,
    }
    app.dependency_overrides.update(overrides)
    try:
        yield overrides
    finally:
        for dependency in overrides:
            app.dependency_overrides.pop(dependency, None)


@pytest.fixture()
def client(app: FastAPI, api_overrides: dict[Any, Any]) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client
