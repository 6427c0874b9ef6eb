# tests/test_seed.py
from sqlalchemy.orm import Session

from province_glow.core.provinces import PROVINCES
from province_glow.models import Province
from province_glow.scripts.seed import seed_provinces


def test_seed_creates_catalog_once(db_session: Session) -> None:
    assert seed_provinces(db_session) == len(PROVINCES)
    assert seed_provinces(db_session) == 0
    assert db_session.query(Province).count() == len(PROVINCES)


def test_seed_keeps_existing_counts(db_session: Session) -> None:
    db_session.add(Province(name="Beijing", count=42))
    db_session.commit()

    seed_provinces(db_session)

    beijing = db_session.query(Province).filter_by(name="Beijing").one()
    assert beijing.count == 42
    assert beijing.cn_name == "北京"


def test_catalog_names_are_unique_ignoring_case() -> None:
    names = [seed.name.lower() for seed in PROVINCES]
    assert len(names) == len(set(names))
