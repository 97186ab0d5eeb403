"""View models for service outputs."""

from mgnrega.domain.views.aggregation import (
    ComparisonView,
    RankedRegion,
    RegionalSummary,
)
from mgnrega.domain.views.maintenance import (
    RefreshSummary,
    BackfillSummary,
    DatabaseStats,
)

__all__ = [
    "ComparisonView",
    "RankedRegion",
    "RegionalSummary",
    "RefreshSummary",
    "BackfillSummary",
    "DatabaseStats",
]
