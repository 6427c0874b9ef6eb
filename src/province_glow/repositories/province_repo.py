"""Data access helpers for working with provinces."""
from __future__ import annotations

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from province_glow.core.provinces import ProvinceSeed
from province_glow.db.time import utcnow
from province_glow.models.province import Province

__all__ = ["ProvinceRepository"]


class ProvinceRepository:
    """Thin wrapper around database access for province entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_name(self, name: str) -> Province | None:
        """Return a province by its exact canonical name."""
        return self.session.scalars(select(Province).where(Province.name == name)).first()

    def find_by_name_insensitive(self, name: str) -> Province | None:
        """Return the province whose name equals ``name`` ignoring case."""
        stmt = select(Province).where(func.lower(Province.name) == name.strip().lower())
        return self.session.scalars(stmt).first()

    def list_all(self) -> list[Province]:
        """Return every province sorted by name."""
        return list(self.session.scalars(select(Province).order_by(Province.name)))

    def increment_count(self, name: str) -> int | None:
        """Atomically add one to a province counter.

        The increment is evaluated by the database (``count = count + 1``) so
        concurrent callers never overwrite each other.

        Returns:
            The new counter value, or None when no province has that name.
        """
        stmt = (
            update(Province)
            .where(Province.name == name)
            .values(count=Province.count + 1, updated_at=utcnow())
            .returning(Province.count)
            .execution_options(synchronize_session=False)
        )
        return self.session.execute(stmt).scalar_one_or_none()

    def ensure(self, seed: ProvinceSeed) -> tuple[Province, bool]:
        """Insert a seed province unless it already exists.

        Returns:
            The province and whether it was created.
        """
        existing = self.get_by_name(seed.name)
        if existing is not None:
            if existing.cn_name is None:
                existing.cn_name = seed.cn_name
            return existing, False
        province = Province(name=seed.name, cn_name=seed.cn_name, count=0, level=0)
        self.session.add(province)
        self.session.flush()
        return province, True
