"""Engine and session factory for the province store."""

from __future__ import annotations

from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from province_glow.core.settings import settings


class Base(DeclarativeBase):
    """Declarative base for the province, message and action log tables."""


# Model modules register their tables on Base.metadata at import time.
import province_glow.models  # noqa: E402,F401


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(
    url: str,
    *,
    echo: bool = False,
    busy_timeout: float | None = None,
) -> Engine:
    """Create an engine for ``url``.

    SQLite connections are shared across request threads, wait up to
    ``busy_timeout`` seconds for a competing writer instead of failing with
    "database is locked", and enforce foreign keys.
    """
    if not url.startswith("sqlite"):
        return create_engine(url, pool_pre_ping=True, echo=echo)

    timeout = settings.sqlite_busy_timeout_seconds if busy_timeout is None else busy_timeout
    engine = create_engine(
        url,
        echo=echo,
        connect_args={"check_same_thread": False, "timeout": timeout},
    )
    event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


engine = build_engine(settings.effective_database_url, echo=settings.sql_debug)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Yield a request-scoped session and close it afterwards."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables() -> None:
    """Create the schema without Alembic (used by ``province-glow-seed --create-tables``)."""
    Base.metadata.create_all(bind=engine)
