"""Monthly performance record for a region."""

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Any, Optional

from mgnrega.domain.models.enums import DataSource

# Expenditure is reported in crore
CRORE = 10_000_000


@dataclass
class PerformanceRecord:
    """
    One region's programme performance for one calendar month.

    ``month`` is always the first day of the month. Synthetic records satisfy
    ``active_workers <= total_workers <= job_cards_issued``; records from the
    store or the upstream provider are taken as-is.
    """

    region_key: str
    month: date
    total_workers: int
    active_workers: int
    job_cards_issued: int
    work_completed_pct: float
    average_wage: float
    person_days_generated: int
    total_expenditure: float
    source: Optional[DataSource] = field(default=None, compare=False)
    last_fetched_at: Optional[datetime] = field(default=None, compare=False)

    def with_source(self, source: DataSource) -> "PerformanceRecord":
        """Copy of this record tagged with the tier that produced it."""
        return replace(self, source=source)

    def to_payload(self) -> dict[str, Any]:
        """JSON-compatible payload stored in the result cache."""
        return {
            "regionKey": self.region_key,
            "month": self.month.isoformat(),
            "totalWorkers": self.total_workers,
            "activeWorkers": self.active_workers,
            "jobCardsIssued": self.job_cards_issued,
            "workCompleted": self.work_completed_pct,
            "averageWage": self.average_wage,
            "totalExpenditure": self.total_expenditure,
            "personDaysGenerated": self.person_days_generated,
        }

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "PerformanceRecord":
        """
        Rebuild a record from a cached payload.

        Raises KeyError/TypeError/ValueError on malformed payloads.
        """
        return cls(
            region_key=str(payload["regionKey"]),
            month=date.fromisoformat(payload["month"][:10]),
            total_workers=int(payload["totalWorkers"]),
            active_workers=int(payload["activeWorkers"]),
            job_cards_issued=int(payload["jobCardsIssued"]),
            work_completed_pct=float(payload["workCompleted"]),
            average_wage=float(payload["averageWage"]),
            person_days_generated=int(payload["personDaysGenerated"]),
            total_expenditure=float(payload["totalExpenditure"]),
        )
