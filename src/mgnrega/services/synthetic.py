"""Deterministic synthetic performance data.

Used as the last resolution tier when no cached, stored or upstream figures
exist. The arithmetic below is frozen: records generated before a deploy must
match records generated after it, so every floor, trig call and rounding step
is part of the contract.
"""

import math
from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from mgnrega.core.months import MonthLike, normalize_month
from mgnrega.domain.models import CRORE, DataSource, PerformanceRecord

DEFAULT_SEED = 65

_CENTS = Decimal("0.01")


def region_seed(region_key: str) -> int:
    """
    Seed derived from the first character after the first ``_`` in the key.

    ``UP_AGRA`` -> ord("A") == 65. Keys without a delimiter, or with nothing
    after it, use DEFAULT_SEED (which is also ord("A")).
    """
    parts = region_key.split("_")
    if len(parts) < 2 or not parts[1]:
        return DEFAULT_SEED
    return _utf16_code_unit(parts[1][0]) or DEFAULT_SEED


def _utf16_code_unit(char: str) -> int:
    """First UTF-16 code unit of a character (high surrogate outside the BMP)."""
    code_point = ord(char)
    if code_point > 0xFFFF:
        return 0xD800 + ((code_point - 0x10000) >> 10)
    return code_point


def round2(value: float) -> float:
    """Round half away from zero on the exact binary value, to 2 places."""
    return float(Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP))


def generate_performance(region_key: str, month: MonthLike) -> PerformanceRecord:
    """Build the synthetic record for a region and month. Pure and deterministic."""
    month_start: date = normalize_month(month)
    seed = region_seed(region_key)
    month_seed = month_start.month

    base_workers = 50000 + seed * 1000 + month_seed * 5000
    activity_rate = 0.65 + math.sin(seed) * 0.15
    completion_rate = 70 + math.cos(seed) * 15
    base_wage = 250 + (seed % 50)

    total_workers = math.floor(base_workers)
    active_workers = math.floor(total_workers * activity_rate)
    job_cards_issued = math.floor(total_workers * 1.15)
    work_completed_pct = round2(completion_rate)
    average_wage = round2(base_wage)
    person_days_generated = math.floor(active_workers * (25 + month_seed * 2))
    total_expenditure = round2(person_days_generated * average_wage / CRORE)

    return PerformanceRecord(
        region_key=region_key,
        month=month_start,
        total_workers=total_workers,
        active_workers=active_workers,
        job_cards_issued=job_cards_issued,
        work_completed_pct=work_completed_pct,
        average_wage=average_wage,
        person_days_generated=person_days_generated,
        total_expenditure=total_expenditure,
        source=DataSource.SYNTHETIC,
    )
