"""Performance record repository protocol."""

from datetime import date
from typing import Protocol, Optional

from mgnrega.domain.models import PerformanceRecord


class PerformanceRepository(Protocol):
    """
    Persistence of resolved performance records, one row per (region, month).

    ``find`` reports an unavailable store as a miss; ``upsert`` raises
    StoreError so callers can decide whether the failure matters.
    """

    def find(self, region_key: str, month: date) -> Optional[PerformanceRecord]:
        """Get the record for a region and normalized month."""
        ...

    def upsert(self, record: PerformanceRecord) -> PerformanceRecord:
        """Insert or overwrite the record for (region_key, month)."""
        ...

    def insert_if_absent(self, record: PerformanceRecord) -> bool:
        """Insert the record unless one exists; True when inserted."""
        ...

    def count(self) -> int:
        """Number of stored records."""
        ...

    def month_range(self) -> tuple[Optional[date], Optional[date]]:
        """Earliest and latest stored month."""
        ...
