"""Enumerations for domain models."""

from enum import Enum


class DataSource(str, Enum):
    """Tier that produced a resolved performance record."""

    CACHE = "CACHE"
    DATABASE = "DATABASE"
    API = "API"
    SYNTHETIC = "SYNTHETIC"


class PerformanceMetric(str, Enum):
    """Metrics a ranking can be ordered by."""

    TOTAL_WORKERS = "totalWorkers"
    ACTIVE_WORKERS = "activeWorkers"
    JOB_CARDS_ISSUED = "jobCardsIssued"
    WORK_COMPLETED = "workCompleted"
    AVERAGE_WAGE = "averageWage"
    TOTAL_EXPENDITURE = "totalExpenditure"
    PERSON_DAYS_GENERATED = "personDaysGenerated"

    @property
    def attribute(self) -> str:
        """Name of the matching PerformanceRecord field."""
        return _METRIC_ATTRIBUTES[self]


_METRIC_ATTRIBUTES = {
    PerformanceMetric.TOTAL_WORKERS: "total_workers",
    PerformanceMetric.ACTIVE_WORKERS: "active_workers",
    PerformanceMetric.JOB_CARDS_ISSUED: "job_cards_issued",
    PerformanceMetric.WORK_COMPLETED: "work_completed_pct",
    PerformanceMetric.AVERAGE_WAGE: "average_wage",
    PerformanceMetric.TOTAL_EXPENDITURE: "total_expenditure",
    PerformanceMetric.PERSON_DAYS_GENERATED: "person_days_generated",
}
