"""Provision the province catalog.

Usage:
    python -m province_glow.scripts.seed [--create-tables]
"""
from __future__ import annotations

import argparse
import logging

from sqlalchemy.orm import Session

from province_glow.core.provinces import PROVINCES
from province_glow.db.session import SessionLocal, create_tables
from province_glow.repositories.province_repo import ProvinceRepository

logger = logging.getLogger(__name__)


def seed_provinces(session: Session) -> int:
    """Insert any missing catalog provinces and return how many were created."""
    repo = ProvinceRepository(session)
    created = 0
    for seed in PROVINCES:
        _, was_created = repo.ensure(seed)
        created += int(was_created)
    session.commit()
    return created


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Seed the province catalog.")
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create tables directly instead of relying on Alembic migrations.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    if args.create_tables:
        create_tables()

    with SessionLocal() as session:
        created = seed_provinces(session)
    logger.info("Seeded %d new provinces (%d in catalog)", created, len(PROVINCES))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
