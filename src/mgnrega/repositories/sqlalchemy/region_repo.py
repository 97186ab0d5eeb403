"""SQLAlchemy implementation of RegionRepository."""

from typing import Optional

from sqlalchemy.orm import sessionmaker

from mgnrega.domain.models import Region
from mgnrega.repositories.sqlalchemy.orm_models import RegionORM


class SqlAlchemyRegionRepository:
    """SQLAlchemy-backed region reference repository."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def list_all(self) -> list[Region]:
        """List all regions, ordered by display name then key."""
        with self._session_factory() as db:
            orm_regions = (
                db.query(RegionORM)
                .order_by(RegionORM.display_name, RegionORM.region_key)
                .all()
            )
            return [self._to_domain(r) for r in orm_regions]

    def find_by_key(self, region_key: str) -> Optional[Region]:
        """Retrieve a region by key."""
        with self._session_factory() as db:
            orm_region = db.get(RegionORM, region_key)
            return self._to_domain(orm_region) if orm_region else None

    def list_children(self, parent_region_key: str) -> list[Region]:
        """List child regions of a parent."""
        with self._session_factory() as db:
            orm_regions = (
                db.query(RegionORM)
                .filter(RegionORM.parent_region_key == parent_region_key)
                .order_by(RegionORM.display_name, RegionORM.region_key)
                .all()
            )
            return [self._to_domain(r) for r in orm_regions]

    def add(self, region: Region) -> Region:
        """Insert or replace a region."""
        with self._session_factory() as db:
            orm_region = db.get(RegionORM, region.region_key)
            if orm_region:
                orm_region.display_name = region.display_name
                orm_region.parent_region_key = region.parent_region_key
            else:
                orm_region = RegionORM(
                    region_key=region.region_key,
                    display_name=region.display_name,
                    parent_region_key=region.parent_region_key,
                )
                db.add(orm_region)
            db.commit()
            return self._to_domain(orm_region)

    def count(self) -> int:
        """Number of regions."""
        with self._session_factory() as db:
            return db.query(RegionORM).count()

    @staticmethod
    def _to_domain(orm: RegionORM) -> Region:
        """Convert ORM region to domain model."""
        return Region(
            region_key=orm.region_key,
            display_name=orm.display_name,
            parent_region_key=orm.parent_region_key,
        )
