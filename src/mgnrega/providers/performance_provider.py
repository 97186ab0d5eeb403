"""Upstream performance data provider protocol."""

from datetime import date
from typing import Protocol, Optional

from mgnrega.domain.models import PerformanceRecord


class PerformanceProvider(Protocol):
    """
    Protocol for upstream MGNREGA data providers.

    Implementations fetch the published figures for one district and month.
    "No data" is a normal outcome and is reported as None, not an exception.
    """

    def fetch(self, region_key: str, month: date) -> Optional[PerformanceRecord]:
        """
        Fetch the record for a region and normalized month.

        Returns None when the provider has nothing for the key.
        """
        ...
