"""Stub upstream provider for offline operation."""

import logging
from datetime import date
from typing import Optional

from mgnrega.domain.models import PerformanceRecord

logger = logging.getLogger(__name__)


class StubPerformanceProvider:
    """
    Stand-in for the public MGNREGA API.

    Always reports "no data", so resolution falls through to the synthetic
    generator.
    """

    def fetch(self, region_key: str, month: date) -> Optional[PerformanceRecord]:
        """Stub: never has data."""
        logger.debug("Upstream provider has no data for %s %s", region_key, month)
        return None
